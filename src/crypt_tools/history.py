import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_HISTORY_PATH = Path.home() / ".crypt_tools_history.jsonl"


def history_path() -> Path:
    """History file, taken from CRYPT_TOOLS_HISTORY when it is set."""
    override = os.getenv("CRYPT_TOOLS_HISTORY", "")
    return Path(override) if override else DEFAULT_HISTORY_PATH


def log_event(action: str, payload: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Append one JSON record per CLI command.

    Write errors are dropped so a read-only home directory never blocks a
    cipher command.
    """
    record = {"action": action, **payload}
    target = path or history_path()
    try:
        with target.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(record, ensure_ascii=False) + "\n")
    except OSError:
        pass
