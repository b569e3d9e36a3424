import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, Optional

from .errors import InvalidArgument

CONFIG_PATH = Path.home() / ".crypt_tools.json"

ENV_MAPPING: Dict[str, str] = {
    "text": "CRYPT_TOOLS_TEXT",
    "level": "CRYPT_TOOLS_LEVEL",
    "key": "CRYPT_TOOLS_KEY",
    "stride": "CRYPT_TOOLS_STRIDE",
}
INT_FIELDS = ("level", "stride")


@dataclass
class CryptConfig:
    text: str = "Hello World"
    level: int = 3
    key: str = "Key123"
    stride: int = 3

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "CryptConfig":
        config = cls()
        for name in ENV_MAPPING:
            if data.get(name) is not None:
                _set_field(config, name, data[name])
        return config

    def validate(self) -> "CryptConfig":
        if not self.key:
            raise InvalidArgument("Configured key must not be empty.")
        if self.stride < 1:
            raise InvalidArgument("Configured stride must be at least 1.")
        return self


def _set_field(config: CryptConfig, name: str, value: object) -> None:
    if name in INT_FIELDS:
        if isinstance(value, str):
            try:
                value = int(value)
            except ValueError:
                raise InvalidArgument(f"Config value '{name}' must be an integer, got {value!r}.") from None
        elif isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgument(f"Config value '{name}' must be an integer, got {value!r}.")
    else:
        value = str(value)
    setattr(config, name, value)


def _merge_env(config: CryptConfig) -> CryptConfig:
    for field_name, env_var in ENV_MAPPING.items():
        env_val = os.getenv(env_var, "")
        if env_val:
            _set_field(config, field_name, env_val)
    return config


def load_config(path: Optional[Path] = None, use_env: bool = True) -> CryptConfig:
    """
    Load defaults, then the JSON file at `path`, then CRYPT_TOOLS_* variables.

    With use_env=False only the stored values are returned, which is what
    save_config should write back.
    """
    path = path or CONFIG_PATH
    config = CryptConfig()
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            # Fall back to defaults/env if file malformed.
            data = {}
        if isinstance(data, dict):
            config = CryptConfig.from_dict(data)
    if use_env:
        config = _merge_env(config)
    return config.validate()


def save_config(config: CryptConfig, path: Optional[Path] = None) -> None:
    path = path or CONFIG_PATH
    payload = config.validate().to_dict()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
