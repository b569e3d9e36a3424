"""Classical shift and shuffle ciphers over A-Z, a-z and 0-9."""

__version__ = "0.1.0"

from .errors import InvalidArgument
from .classical import (
    ALPHABETS,
    DIGITS,
    LOWERCASE,
    UPPERCASE,
    Alphabet,
    caesar,
    char_value,
    classify,
    keyed_shift_cipher,
    shift_cipher,
    vigenere,
)
from .transposition import block_transpose, block_transpose_inverse
from .config import CryptConfig, load_config, save_config
from .plugin import CipherPlugin, get_plugin, list_plugins, register_plugin
from .demo import DemoResult, char_value_samples, render_demo, run_demo

__all__ = [
    "InvalidArgument",
    "ALPHABETS",
    "DIGITS",
    "LOWERCASE",
    "UPPERCASE",
    "Alphabet",
    "caesar",
    "char_value",
    "classify",
    "keyed_shift_cipher",
    "shift_cipher",
    "vigenere",
    "block_transpose",
    "block_transpose_inverse",
    "CryptConfig",
    "load_config",
    "save_config",
    "CipherPlugin",
    "get_plugin",
    "list_plugins",
    "register_plugin",
    "DemoResult",
    "char_value_samples",
    "render_demo",
    "run_demo",
]
