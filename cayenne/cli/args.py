# cayenne/cli/args.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional


def parse_hex_payload(text: str) -> bytes:
    """
    argparse type: hex string -> bytes.

    Accepts whitespace, ':' / '-' separators and an optional 0x prefix
    ("01 67 01 10", "0x01671110", "01:67:01:10").
    """
    s = str(text).strip()
    if s.lower().startswith("0x"):
        s = s[2:]
    s = "".join(ch for ch in s if ch not in " \t:-")
    try:
        return bytes.fromhex(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid hex payload '{text}'") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cayenne", description="Cayenne LPP payload decoder.")
    parser.add_argument(
        "--types",
        type=Path,
        default=None,
        help="Standard type table (YAML). Defaults to the bundled v1 table.",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Append logs to this file.")

    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("types", help="List registered data types.")

    p_decode = sub.add_parser("decode", help="Decode hex payload(s) to JSON.")
    p_decode.add_argument("payloads", type=parse_hex_payload, nargs="+", metavar="HEX")
    p_decode.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indent (negative = compact single line).",
    )

    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
