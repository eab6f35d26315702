"""Command line argument handling package."""

from portafs.ui.cli.args.parser import ArgumentParser
from portafs.ui.cli.args.options import CLIArgs, GlobalArgs, MkdirArgs, PathArgs, PwdArgs

__all__ = ["ArgumentParser", "CLIArgs", "GlobalArgs", "MkdirArgs", "PathArgs", "PwdArgs"]
