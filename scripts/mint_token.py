#!/usr/bin/env python3
"""Mint a launch token from the command line.

Fields are given as ``name=value`` pairs, exactly as a launch form would
submit them:

    python scripts/mint_token.py --signing-key signing.pem \\
        --encryption-key encryption.pem schema=1_0205.json user_id=u1 ru_ref=12345678901A

Key paths default to ``JWT_SIGNING_KEY_PATH`` / ``JWT_ENCRYPTION_KEY_PATH``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyeqlaunch import LaunchConfig, LaunchError, convert_post_to_token  # noqa: E402


def _parse_fields(pairs: list[str]) -> dict[str, str]:
    fields: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise argparse.ArgumentTypeError(f"expected name=value, got {pair!r}")
        # First value wins, as with a submitted form.
        fields.setdefault(name, value)
    return fields


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--signing-key", help="PEM file with the RSA signing private key")
    parser.add_argument("--encryption-key", help="PEM file with the RSA encryption public key")
    parser.add_argument("--redact-logs", action="store_true", help="mask form values and token in debug logs")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("fields", nargs="*", metavar="name=value")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, stream=sys.stderr)

    try:
        fields = _parse_fields(args.fields)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))

    overrides: dict[str, object] = {}
    if args.signing_key:
        overrides["signing_key_path"] = args.signing_key
    if args.encryption_key:
        overrides["encryption_key_path"] = args.encryption_key
    if args.redact_logs:
        overrides["redact_logs"] = True

    try:
        config = LaunchConfig.from_env(**overrides)
        token = convert_post_to_token(fields, config)
    except LaunchError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
