"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from portafs.config.config import Config
from portafs.features.filesystem import Backend
from portafs.platform.logging import logger, setup_logger
from portafs.ui.cli.args.options import CLIArgs, GlobalArgs, MkdirArgs, PathArgs, PwdArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="portafs",
            description="portafs - portable directory creation, existence checks and removal.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--backend",
            choices=[b.value for b in Backend],
            help="Filesystem backend (defaults to the configured value)",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            help="Path to a TOML configuration file",
            metavar="CONFIG_PATH",
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Report every directory segment and non-fatal condition",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        mkdir_parser = subparsers.add_parser(
            "mkdir",
            help="Create a directory and any missing ancestors",
        )
        _ = mkdir_parser.add_argument("path", type=str, metavar="PATH")
        _ = mkdir_parser.add_argument(
            "--mode",
            type=str,
            help="Permission bits in octal, e.g. 755 or 0o700",
            metavar="OCTAL",
        )

        exists_parser = subparsers.add_parser(
            "exists",
            help="Print whether an entry exists at PATH",
        )
        _ = exists_parser.add_argument("path", type=str, metavar="PATH")

        _ = subparsers.add_parser("pwd", help="Print the current working directory")

        rm_parser = subparsers.add_parser(
            "rm",
            help="Remove a single file or empty directory",
        )
        _ = rm_parser.add_argument("path", type=str, metavar="PATH")

        rmtree_parser = subparsers.add_parser(
            "rmtree",
            help="Remove PATH and everything beneath it",
        )
        _ = rmtree_parser.add_argument("path", type=str, metavar="PATH")

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If an option fails validation.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(parsed_args.quiet)
        is_verbose = bool(parsed_args.verbose)

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        config_path = Path(parsed_args.config) if parsed_args.config else None
        configuration = Config.load(config_path)
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        options = GlobalArgs(
            backend=parsed_args.backend,
            config_path=config_path,
            verbose=is_verbose,
            quiet=is_quiet,
        )
        command: str = parsed_args.command

        if command == "mkdir":
            return MkdirArgs(
                command="mkdir",
                path=parsed_args.path,
                mode=ArgumentParser._parse_mode(parsed_args.mode),
                options=options,
            )

        if command in {"exists", "rm", "rmtree"}:
            return PathArgs(command=command, path=parsed_args.path, options=options)

        return PwdArgs(command="pwd", options=options)

    @staticmethod
    def _parse_mode(raw_mode: str | None) -> int | None:
        if raw_mode is None:
            return None
        try:
            mode = int(raw_mode.strip().lower().removeprefix("0o"), 8)
        except ValueError:
            logger.error("Mode must be an octal number; received %s", raw_mode)
            sys.exit(2)
        if not 0 <= mode <= 0o7777:
            logger.error("Mode out of range: %s", raw_mode)
            sys.exit(2)
        return mode
