#!/usr/bin/env python3
"""
Generates AI-powered release notes from the git changes between two tags
"""
import argparse
import sys

from dotenv import load_dotenv
from loguru import logger

from . import __version__
from .api import ConfigurationError, create_client, get_api_key
from .changelog import generate_changelog
from .utils import setup_logging


def write_changelog(changelog, output=None):
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(changelog)
        logger.success(f"Changelog has been written to {output}")
    else:
        print(changelog)


def parse_args(argv=None):
    class Formatter(argparse.RawTextHelpFormatter, argparse.ArgumentDefaultsHelpFormatter):
        pass

    PARSER = argparse.ArgumentParser(
        prog="release-notes-ai",
        formatter_class=Formatter,
        description="Generate AI-powered release notes from git tags")
    PARSER.add_argument("-f", "--from", dest="from_tag", required=True, metavar="TAG", help="Starting tag or commit")
    PARSER.add_argument("-t", "--to", dest="to_tag", required=True, metavar="TAG", help="Ending tag or commit")
    PARSER.add_argument("-o", "--output", metavar="FILE", help="Output file (optional)")
    PARSER.add_argument(
        "-k",
        "--api-key",
        metavar="KEY",
        help="OpenAI API Key (can also be set via OPENAI_API_KEY environment variable)")
    PARSER.add_argument(
        "-d", "--detailed", action="store_true", help="Generate detailed changelog with technical information")
    PARSER.add_argument("--debug", action="store_true", help="Show debug messages")
    PARSER.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return PARSER.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    if args.debug:
        setup_logging("DEBUG", {"function": True})
    else:
        setup_logging("INFO")

    load_dotenv()

    try:
        client = create_client(get_api_key(args.api_key))
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    changelog = generate_changelog(client, args.from_tag, args.to_tag, args.detailed)
    try:
        write_changelog(changelog, args.output)
    except OSError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
