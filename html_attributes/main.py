#!/usr/bin/env python3
"""
Wink Attributes - Command line entry point

Normalizes an HTML attribute string, optionally edits it, and prints the
result as an attribute string or as JSON.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from html_attributes import __version__
from html_attributes.dom.attribute_map import AttributeMap
from html_attributes.exceptions import AttributeMapError, ConfigError
from html_attributes.parser.attr_parser import BARE_TOKEN_POLICIES
from html_attributes.utils.config import Config
from html_attributes.utils.logging import log_exception, setup_logging

logger = logging.getLogger(__name__)


class EditAction(argparse.Action):
    """Collect edit options into one list so they run in command line order."""

    def __call__(self, parser, namespace, values, option_string=None):
        edits = list(getattr(namespace, self.dest, None) or [])
        edits.append((self.const, values))
        setattr(namespace, self.dest, edits)


def build_arg_parser() -> argparse.ArgumentParser:
    """Create the command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="wink-attributes",
        description="Normalize and edit HTML attribute strings. "
                    "Edits are applied in the order they are given."
    )

    parser.add_argument("attributes", nargs="?", default="",
                        help='Attribute string, e.g. \'id="app" disabled\'')
    parser.add_argument("--set", dest="edits", action=EditAction, const="set", default=[],
                        metavar="NAME[=VALUE]", help="Set an attribute; without a value it becomes a flag")
    parser.add_argument("--delete", dest="edits", action=EditAction, const="delete", default=[],
                        metavar="NAME", help="Delete an attribute")
    parser.add_argument("--append", dest="edits", action=EditAction, const="append", default=[],
                        metavar="NAME=VALUE", help="Append text to an attribute value")
    parser.add_argument("--prepend", dest="edits", action=EditAction, const="prepend", default=[],
                        metavar="NAME=VALUE", help="Prepend text to an attribute value")
    parser.add_argument("--json", action="store_true", help="Print the attributes as a JSON object")
    parser.add_argument("--bare-tokens", choices=BARE_TOKEN_POLICIES, default=None,
                        help="How to treat tokens without '=' (overrides the config file)")
    parser.add_argument("--config", default=None, metavar="PATH", help="Path to a JSON config file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"Wink Attributes {__version__}")

    return parser


def _split_pair(parser: argparse.ArgumentParser, option: str, pair: str) -> Tuple[str, str]:
    name, sep, value = pair.partition('=')
    if not sep or not name:
        parser.error(f"{option} expects NAME=VALUE, got {pair!r}")
    return name, value


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        int: Process exit code
    """
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)

    config = Config(args.config)
    if args.bare_tokens:
        config.set("parser.bare_tokens", args.bare_tokens)

    try:
        logging_options = config.logging_options()
        attribute_parser = config.create_parser()
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.debug:
        logging_options["console_level"] = "DEBUG"
    setup_logging(colored=sys.stderr.isatty(), **logging_options)

    try:
        attributes = AttributeMap.make(args.attributes, parser=attribute_parser)
    except AttributeMapError as e:
        log_exception(logger, e, "Could not parse attributes")
        print(f"error: {e}", file=sys.stderr)
        return 1

    for action, item in args.edits:
        if action == "set":
            name, sep, value = item.partition('=')
            if sep:
                attributes.set(name, value)
            else:
                attributes.set(name)
        elif action == "append":
            attributes.append(*_split_pair(arg_parser, "--append", item))
        elif action == "prepend":
            attributes.prepend(*_split_pair(arg_parser, "--prepend", item))
        else:
            attributes.delete(item)

    logger.debug(f"Result has {attributes.count()} attributes")

    if args.json:
        print(json.dumps(attributes.to_dict()))
    else:
        print(attributes.serialize())

    return 0


if __name__ == "__main__":
    sys.exit(main())
