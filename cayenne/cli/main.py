# cayenne/cli/main.py
from __future__ import annotations

import json
import logging
from typing import Optional

from cayenne.app.config import DecoderConfig
from cayenne.app.logging_config import configure_file_logging
from cayenne.core.errors import CayenneError
from cayenne.protocol.decoder import Decoder

from cayenne.cli.args import parse_args

_log = logging.getLogger(__name__)


def cmd_types(decoder: Decoder) -> int:
    for dt in decoder.types():
        print(f"0x{dt.type_id:02x}  {dt.name:<16} size={dt.size}  {dt.origin.value}")
    return 0


def cmd_decode(decoder: Decoder, payloads: list[bytes], *, indent: Optional[int]) -> int:
    for payload in payloads:
        doc = decoder.decode(payload)
        _log.info("PAYLOAD_DECODED len=%d keys=%d", len(payload), len(doc))
        print(json.dumps(doc, indent=indent))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    if args.log_file is not None:
        configure_file_logging(args.log_file)

    try:
        decoder = Decoder(DecoderConfig(types_path=args.types))

        if args.cmd == "types":
            return cmd_types(decoder)
        if args.cmd == "decode":
            indent = args.indent if args.indent >= 0 else None
            return cmd_decode(decoder, args.payloads, indent=indent)

        return 2
    except CayenneError as e:
        _log.warning("CLI_FAILED code=%s msg=%s", e.code, e.message)
        print(f"ERROR: {e.message}")
        if e.hint:
            print(f"Hint: {e.hint}")
        return 1
