from typing import Callable, Dict, List, Optional

from .classical import keyed_shift_cipher, shift_cipher
from .config import CryptConfig
from .transposition import block_transpose, block_transpose_inverse


class CipherPlugin:
    """
    Simple plugin interface for a reversible text transformation.
    """

    name: str = "plugin"
    title: str = ""
    description: str = ""

    def encode(self, text: str, config: CryptConfig) -> str:  # pragma: no cover - interface only
        raise NotImplementedError

    def decode(self, text: str, config: CryptConfig) -> str:  # pragma: no cover - interface only
        raise NotImplementedError

    def params(self, config: CryptConfig) -> str:
        """Short label of the parameters used, e.g. 'Level 3'."""
        return ""


class CaesarPlugin(CipherPlugin):
    name = "caesar"
    title = "Caesar Cipher"
    description = "Shift letters and digits by a fixed level."

    def encode(self, text: str, config: CryptConfig) -> str:
        return shift_cipher(text, config.level)

    def decode(self, text: str, config: CryptConfig) -> str:
        return shift_cipher(text, -config.level)

    def params(self, config: CryptConfig) -> str:
        return f"Level {config.level}"


class VigenerePlugin(CipherPlugin):
    name = "vigenere"
    title = "Vigenère Cipher"
    description = "Shift each character by the value of the matching key character."

    def encode(self, text: str, config: CryptConfig) -> str:
        return keyed_shift_cipher(text, config.key)

    def decode(self, text: str, config: CryptConfig) -> str:
        return keyed_shift_cipher(text, config.key, reverse=True)

    def params(self, config: CryptConfig) -> str:
        return f"Key {config.key}"


class ShufflePlugin(CipherPlugin):
    name = "shuffle"
    title = "Shuffle"
    description = "Regroup characters round-robin by stride."

    def encode(self, text: str, config: CryptConfig) -> str:
        return block_transpose(text, config.stride)

    def decode(self, text: str, config: CryptConfig) -> str:
        return block_transpose_inverse(text, config.stride)

    def params(self, config: CryptConfig) -> str:
        return f"Stride {config.stride}"


_PLUGINS: Dict[str, CipherPlugin] = {}


def register_plugin(factory: Callable[[], CipherPlugin]) -> CipherPlugin:
    plugin = factory()
    _PLUGINS[plugin.name] = plugin
    return plugin


def get_plugin(name: str) -> Optional[CipherPlugin]:
    return _PLUGINS.get(name)


def all_plugins() -> List[CipherPlugin]:
    return list(_PLUGINS.values())


def list_plugins() -> Dict[str, str]:
    return {name: plugin.description for name, plugin in _PLUGINS.items()}


for _factory in (CaesarPlugin, VigenerePlugin, ShufflePlugin):
    register_plugin(_factory)
