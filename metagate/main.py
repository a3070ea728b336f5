from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

import dotenv

from .config import Config
from .logging_setup import setup_logging
from .normalize import split_domain, clean_string, parse_image_url
from .wide_int import InvalidHexFormat, to_u256

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="metagate", description="Domain, token id and image URL normalization")
    ap.add_argument("--config", help="Path to config.yaml (optional)")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("split", help="Split a domain into prefix and root")
    p.add_argument("domain")

    p = sub.add_parser("u256", help="Compose a 256-bit id from low/high hex halves")
    p.add_argument("low")
    p.add_argument("high")
    p.add_argument("--decimal", action="store_true", help="Print base 10 instead of hex")

    p = sub.add_parser("clean", help="Strip NUL characters (\\0 escapes are honoured)")
    p.add_argument("text")

    p = sub.add_parser("image", help="Resolve an image URL through the IPFS gateway")
    p.add_argument("url")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    dotenv.load_dotenv(dotenv.find_dotenv(usecwd=True))

    cfg = Config.load(args.config) if args.config else Config()
    setup_logging(cfg.data)
    log.debug("metagate %s (config: %s)", args.command, args.config or "<default>")

    if args.command == "split":
        prefix, root = split_domain(args.domain)
        print(f"{prefix}\t{root}")
    elif args.command == "u256":
        try:
            value = to_u256(args.low, args.high)
        except InvalidHexFormat as e:
            log.error("Cannot compose u256: %s", e)
            print(f"error: {e}", file=sys.stderr)
            return 2
        print(int(value) if args.decimal else value.to_hex())
    elif args.command == "clean":
        print(clean_string(args.text.replace("\\0", "\x00")))
    elif args.command == "image":
        print(parse_image_url(cfg, args.url))
    return 0


if __name__ == "__main__":
    sys.exit(main())
