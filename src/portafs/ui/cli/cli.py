"""Command line interface for portafs."""

from typing import final

from portafs.application.services import FileSystemService
from portafs.config.config import ConfigError
from portafs.features.filesystem import FatalFileSystemError
from portafs.platform.logging import logger
from portafs.ui.cli.args import ArgumentParser
from portafs.ui.cli.args.options import CLIArgs, MkdirArgs, PathArgs


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments and return the exit code.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args = ArgumentParser.process_args(args_list)
            service = FileSystemService.from_config(
                args.options.config_path,
                verbosity=1 if args.options.verbose else None,
                backend=args.options.backend,
            )
            return CommandProcessor._dispatch(args, service)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            return 130
        except ConfigError as e:
            logger.error("Configuration error: %s", e)
            return 1
        except FatalFileSystemError as e:
            logger.critical("%s", e, extra={"fs_event": "filesystem.fatal"})
            return 1

    @staticmethod
    def _dispatch(args: CLIArgs, service: FileSystemService) -> int:
        if isinstance(args, MkdirArgs):
            ok = service.create_directories(args.path, args.mode, args.options.verbose or None)
            return 0 if ok else 1

        if isinstance(args, PathArgs):
            if args.command == "exists":
                found = service.exists(args.path)
                print("true" if found else "false")
                return 0 if found else 1
            if args.command == "rm":
                ok = service.remove(args.path)
                if not ok:
                    logger.error("Failed to remove %s", args.path)
                return 0 if ok else 1
            return 0 if service.remove_all(args.path) else 1

        print(service.current_path())
        return 0


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success).
    """
    return CommandProcessor.process_command()
