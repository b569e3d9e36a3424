import argparse
from pathlib import Path
from typing import Dict, List, Optional

from . import (
    block_transpose,
    block_transpose_inverse,
    char_value,
    keyed_shift_cipher,
    shift_cipher,
)
from .config import CONFIG_PATH, CryptConfig, load_config, save_config
from .demo import char_value_samples, render_demo, run_demo
from .errors import InvalidArgument
from .history import log_event


def _config_path(args: argparse.Namespace) -> Path:
    return Path(args.config) if getattr(args, "config", None) else CONFIG_PATH


def _load_config(args: argparse.Namespace) -> CryptConfig:
    return load_config(_config_path(args))


def _load_text(args: argparse.Namespace) -> str:
    if getattr(args, "in_file", None):
        return Path(args.in_file).read_text(encoding="utf-8")
    if args.text is None:
        raise InvalidArgument("Provide TEXT or --in-file.")
    return args.text


def _write_output(args: argparse.Namespace, output: str) -> None:
    if getattr(args, "out_file", None):
        Path(args.out_file).write_text(output, encoding="utf-8")
    else:
        print(output)


def _run_caesar(args: argparse.Namespace) -> str:
    level = args.shift if args.shift is not None else _load_config(args).level
    return shift_cipher(_load_text(args), level)


def _run_vigenere(args: argparse.Namespace) -> str:
    key = args.key if args.key is not None else _load_config(args).key
    return keyed_shift_cipher(_load_text(args), key, reverse=args.mode == "decrypt")


def _run_shuffle(args: argparse.Namespace) -> str:
    stride = args.stride if args.stride is not None else _load_config(args).stride
    text = _load_text(args)
    if args.mode == "encode":
        return block_transpose(text, stride)
    return block_transpose_inverse(text, stride)


def _run_charval(args: argparse.Namespace) -> str:
    return str(char_value(args.char))


def _overrides(args: argparse.Namespace) -> Dict[str, object]:
    return {
        name: getattr(args, name)
        for name in ("text", "level", "key", "stride")
        if getattr(args, name, None) is not None
    }


def _run_demo(args: argparse.Namespace) -> str:
    config = _load_config(args)
    config = CryptConfig.from_dict({**config.to_dict(), **_overrides(args)})
    return render_demo(run_demo(config), char_value_samples())


def _run_config(args: argparse.Namespace) -> str:
    path = _config_path(args)
    changes = _overrides(args)
    if changes:
        stored = load_config(path, use_env=False)
        save_config(CryptConfig.from_dict({**stored.to_dict(), **changes}), path)
    config = load_config(path)
    lines = [f"{name}: {value}" for name, value in config.to_dict().items()]
    if changes:
        lines.append(f"Saved to {path}; CRYPT_TOOLS_* environment variables still take precedence.")
    return "\n".join(lines)


def _add_io_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("text", nargs="?", help="Input text (ignored if --in-file).")
    p.add_argument("--in-file", help="Read input from file.")
    p.add_argument("--out-file", help="Write the result to a file instead of stdout.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Classical shift and shuffle ciphers.")
    parser.add_argument(
        "--no-history", action="store_true", help="Do not record the operation in history."
    )
    parser.add_argument("--config", help=f"Config file with defaults (default: {CONFIG_PATH}).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    caesar_parser = subparsers.add_parser("caesar", help="Caesar cipher encode/decode")
    _add_io_args(caesar_parser)
    caesar_parser.add_argument(
        "--shift",
        type=int,
        help="Shift to apply (positive to encode, negative to decode). Defaults to the configured level.",
    )
    caesar_parser.set_defaults(func=_run_caesar)

    vig_parser = subparsers.add_parser("vigenere", help="Vigenere cipher encrypt/decrypt")
    vig_parser.add_argument("mode", choices=["encrypt", "decrypt"])
    _add_io_args(vig_parser)
    vig_parser.add_argument("--key", help="Cipher key. Defaults to the configured key.")
    vig_parser.set_defaults(func=_run_vigenere)

    shuffle_parser = subparsers.add_parser("shuffle", help="Block shuffle/unshuffle")
    shuffle_parser.add_argument("mode", choices=["encode", "decode"])
    _add_io_args(shuffle_parser)
    shuffle_parser.add_argument(
        "--stride", type=int, help="Group size. Defaults to the configured stride."
    )
    shuffle_parser.set_defaults(func=_run_shuffle)

    charval_parser = subparsers.add_parser("charval", help="Numeric value of a key character")
    charval_parser.add_argument("char", help="A single character.")
    charval_parser.set_defaults(func=_run_charval)

    for name, help_text, func in (
        ("demo", "Encode and decode a sample with every cipher", _run_demo),
        ("config", "Show or update the stored defaults", _run_config),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--text", help="Sample text.")
        sub.add_argument("--level", type=int, help="Caesar level.")
        sub.add_argument("--key", help="Vigenere key.")
        sub.add_argument("--stride", type=int, help="Shuffle stride.")
        sub.set_defaults(func=func)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        result = args.func(args)
    except InvalidArgument as exc:
        parser.error(str(exc))
    _write_output(args, result)
    if not args.no_history:
        log_event(
            action=args.command,
            payload={
                "mode": getattr(args, "mode", None),
                "input": getattr(args, "text", None),
                "in_file": getattr(args, "in_file", None),
                "out_file": getattr(args, "out_file", None),
            },
        )


if __name__ == "__main__":
    main()
