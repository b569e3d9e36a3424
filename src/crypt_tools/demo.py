from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from .classical import char_value
from .config import CryptConfig
from .plugin import all_plugins

DEFAULT_SAMPLES = ("K", "5")


@dataclass
class DemoResult:
    name: str
    title: str
    params: str
    original: str
    encoded: str
    decoded: str

    @property
    def roundtrip_ok(self) -> bool:
        return self.original == self.decoded


def run_demo(config: Optional[CryptConfig] = None) -> List[DemoResult]:
    """
    Encode then decode the configured text with every registered family.
    """
    cfg = (config or CryptConfig()).validate()
    results: List[DemoResult] = []
    for plugin in all_plugins():
        encoded = plugin.encode(cfg.text, cfg)
        results.append(
            DemoResult(
                name=plugin.name,
                title=plugin.title,
                params=plugin.params(cfg),
                original=cfg.text,
                encoded=encoded,
                decoded=plugin.decode(encoded, cfg),
            )
        )
    return results


def char_value_samples(chars: Iterable[str] = DEFAULT_SAMPLES) -> List[Tuple[str, int]]:
    return [(ch, char_value(ch)) for ch in chars]


def render_demo(results: Sequence[DemoResult], samples: Sequence[Tuple[str, int]] = ()) -> str:
    lines: List[str] = []
    for res in results:
        lines.append(f"=== {res.title} ===")
        lines.append(f"Original Message: {res.original}")
        lines.append(f"Encoded ({res.params}): {res.encoded}")
        lines.append(f"Decoded: {res.decoded}")
        lines.append(f"Round trip: {'ok' if res.roundtrip_ok else 'FAILED'}")
        lines.append("")
    if samples:
        lines.append("=== Character Value ===")
        for ch, value in samples:
            lines.append(f"Character: {ch}")
            lines.append(f"Value: {value}")
        lines.append("")
    return "\n".join(lines).rstrip("\n")
