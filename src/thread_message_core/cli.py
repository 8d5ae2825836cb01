"""CLI entry point for encoding and checking thread message payloads.

Usage:
    thread-message encode "Describe these" --file-id file-1 --file-id file-2
    thread-message validate message.json
    thread-message validate < message.json
"""

import argparse
import logging
import sys
from typing import get_args

from thread_message_core.codec import dumps_message, loads_message
from thread_message_core.config import ThreadMessageConfig
from thread_message_core.errors import ContentDecodeError
from thread_message_core.models.query import MessageQuery, Role


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thread-message",
        description="Encode and validate thread message payloads",
    )
    sub = parser.add_subparsers(dest="command")

    encode_parser = sub.add_parser("encode", help="Encode text and attachments")
    encode_parser.add_argument("text", help="Message text")
    encode_parser.add_argument(
        "--file-id",
        dest="file_ids",
        action="append",
        default=[],
        help="Uploaded file ID to attach as an image (repeatable)",
    )
    encode_parser.add_argument(
        "--role",
        choices=get_args(Role),
        default=None,
        help="Message role (default: THREADMSG_DEFAULT_ROLE or user)",
    )

    validate_parser = sub.add_parser(
        "validate", help="Decode a message payload and print it normalized"
    )
    validate_parser.add_argument(
        "path",
        nargs="?",
        help="JSON file to read (default: stdin)",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    config = ThreadMessageConfig()

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "encode":
        query = MessageQuery.from_text(
            args.role or config.default_role, args.text, args.file_ids
        )
        print(dumps_message(query, config))
    elif args.command == "validate":
        if args.path:
            try:
                with open(args.path, "rb") as f:
                    raw = f.read()
            except OSError as e:
                print(f"thread-message: cannot read {args.path}: {e}", file=sys.stderr)
                sys.exit(1)
        else:
            raw = sys.stdin.read()

        try:
            query = loads_message(raw)
        except ContentDecodeError as e:
            print(f"thread-message: invalid message: {e}", file=sys.stderr)
            sys.exit(1)
        print(dumps_message(query, config))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
