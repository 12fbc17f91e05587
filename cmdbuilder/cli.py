# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description: CLI entry point for the application
"""
import sys
import argparse
from loguru import logger

from cmdbuilder.command import CommandBuilder
from cmdbuilder.config import load_config, CLI_VERSION
from cmdbuilder.format_command import Separators
from cmdbuilder.tools import ShellExecutor


def parse_argument(text):
    """Split NAME=VALUE, a bare NAME is a flag"""
    name, sep, value = text.partition("=")
    return name, (value if sep else None)


def build_parser():
    parser = argparse.ArgumentParser(description="Cmdbuilder CLI - build and run shell command lines")
    parser.add_argument("command", nargs="?", help="Command to build")
    parser.add_argument("parameters", nargs="*", help="Positional parameters of the command")
    parser.add_argument("--arg", "-a", action="append", default=[], metavar="NAME[=VALUE]",
                        help="Argument to add (can be used multiple times)")
    parser.add_argument("--separators", "-s", nargs=4,
                        metavar=("SHORT_PREFIX", "SHORT_SEP", "LONG_PREFIX", "LONG_SEP"),
                        help="Separators matrix")
    parser.add_argument("--config", "-c", type=str, help="Path to configuration file")
    parser.add_argument("--execute", "-x", action="store_true", help="Execute the command and print its output")
    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=str, help="Also write logs to this file")
    parser.add_argument("--version", "-v", action="store_true", help="Show version information")
    return parser


def main(argv=None):
    """Main entry point for the CLI"""
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    # Show version and exit if requested
    if args.version:
        print(f"Cmdbuilder CLI v{CLI_VERSION}")
        return 0
    if not args.command:
        parser.error("the following arguments are required: command")

    # Load configuration
    config = load_config(args.config)
    if args.separators:
        config.separators = Separators(*args.separators)

    # Configure logging
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if (args.debug or config.debug) else "INFO")
    if args.log_file:
        logger.add(args.log_file, rotation="10 MB")

    cmd = CommandBuilder(args.command, config.separators, ShellExecutor.from_config(config))
    for item in args.arg:
        cmd.add_argument(*parse_argument(item))
    cmd.add_parameters(args.parameters)

    if args.execute:
        print(cmd.execute(), end="")
    else:
        print(cmd)
    return 0


if __name__ == "__main__":
    sys.exit(main())
