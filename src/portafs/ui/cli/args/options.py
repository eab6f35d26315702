"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

CommandName = Literal["mkdir", "exists", "pwd", "rm", "rmtree"]


@final
@dataclass(slots=True)
class GlobalArgs:
    """Options shared by every subcommand."""

    backend: str | None
    config_path: Path | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class MkdirArgs:
    """Command line arguments for the ``mkdir`` subcommand."""

    command: Literal["mkdir"]
    path: str
    mode: int | None
    options: GlobalArgs


@final
@dataclass(slots=True)
class PathArgs:
    """Command line arguments for single-path subcommands."""

    command: Literal["exists", "rm", "rmtree"]
    path: str
    options: GlobalArgs


@final
@dataclass(slots=True)
class PwdArgs:
    """Command line arguments for the ``pwd`` subcommand."""

    command: Literal["pwd"]
    options: GlobalArgs


CLIArgs = MkdirArgs | PathArgs | PwdArgs

__all__ = ["CLIArgs", "CommandName", "GlobalArgs", "MkdirArgs", "PathArgs", "PwdArgs"]
