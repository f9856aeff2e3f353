#!/usr/bin/env python3
"""
Claude CLI entry point

Parses the command line, loads the stored API key and either runs a
subcommand or enters the interactive chat loop.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .errors import ClaudeCliError
from .services import AIService, ChatService, Config

STATUS_TEXT = """Available commands:
  setkey <key>    Set your Claude API key
  status          Show this status message

In chat mode:
  /quit           Exit the program
  /help           Show help message"""

NO_KEY_MESSAGE = "No API key found. Please set your API key using: claude-cli setkey <your-api-key>"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="claude-cli",
        description="Chat with Claude from your terminal",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command")

    setkey = subparsers.add_parser("setkey", help="Set your Claude API key")
    setkey.add_argument("key", help="Your Claude API key")

    subparsers.add_parser("status", help="Show available commands and usage information")
    return parser


def run(args: argparse.Namespace) -> int:
    config = Config.load()

    if args.command == "setkey":
        config.set_key(args.key)
        print("API key has been set successfully.")
        return 0

    if args.command == "status":
        print(STATUS_TEXT)
        return 0

    if config.api_key is None:
        print(NO_KEY_MESSAGE)
        return 0

    with AIService() as ai_service:
        ChatService(config, ai_service).run()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function; returns the process exit status"""
    logging.basicConfig(level=logging.WARNING, format="%(message)s", stream=sys.stderr)

    args = build_parser().parse_args(argv)

    try:
        return run(args)
    except KeyboardInterrupt:
        print()
        return 0
    except (ClaudeCliError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
