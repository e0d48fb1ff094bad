"""Command line argument parser."""

import argparse
from collections.abc import Sequence
from dataclasses import fields
from typing import Any, final

from tagsort import __version__
from tagsort.config import (
    CONFIG_ENV_VAR,
    DEFAULT_PATTERN,
    DEFAULT_TEMPLATE,
    RunConfig,
    load_config_file,
    resolve_config_path,
)
from tagsort.platform.logging import setup_logger, verbosity_to_level

TEMPLATE_HELP = """\
template placeholders:
  %a  artist
  %A  album
  %t  title
  %g  genre
  %n  track number
"""

# argparse %-formats help strings
_ESCAPED_TEMPLATE = DEFAULT_TEMPLATE.replace("%", "%%")


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Flags default to None so that only options actually given on the
        command line override the config file.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="tagsort",
            description="Move or copy audio files into directories named after their tags.",
            epilog=TEMPLATE_HELP,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        _ = parser.add_argument(
            "-v",
            dest="verbosity",
            action="count",
            default=None,
            help="Increase verbosity (repeatable)",
        )
        _ = parser.add_argument(
            "-t",
            "--template",
            type=str,
            default=None,
            metavar="STRING",
            help=f"Placeholder template for the target path (default: {_ESCAPED_TEMPLATE})",
        )
        _ = parser.add_argument(
            "--dry-run",
            action="store_true",
            default=None,
            help="Show what would be done without touching the filesystem",
        )
        album_group = parser.add_mutually_exclusive_group()
        _ = album_group.add_argument(
            "--allow_missing_album_info",
            "--allow-missing-album-info",
            dest="allow_missing_album_info",
            action="store_const",
            const=True,
            default=None,
            help="Render a missing album as an empty string (default)",
        )
        _ = album_group.add_argument(
            "--require-album-info",
            dest="allow_missing_album_info",
            action="store_const",
            const=False,
            default=None,
            help="Skip files without album info when the template uses %%A",
        )
        _ = parser.add_argument(
            "--base-dir",
            type=str,
            default=None,
            metavar="PATH",
            help="Directory scanned for files (default: current directory)",
        )
        _ = parser.add_argument(
            "--target-dir",
            type=str,
            default=None,
            metavar="PATH",
            help="Directory the rendered paths are created in (default: current directory)",
        )
        _ = parser.add_argument(
            "--use-copy",
            action="store_true",
            default=None,
            help="Copy files instead of moving them",
        )
        _ = parser.add_argument(
            "--replace-spaces",
            action="store_true",
            default=None,
            help="Replace whitespace in rendered paths with underscores",
        )
        _ = parser.add_argument(
            "--pattern",
            type=str,
            default=None,
            metavar="GLOB",
            help=f"File name pattern to scan for (default: {DEFAULT_PATTERN})",
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            default=None,
            metavar="FILE",
            help=f"TOML file with option defaults (or set {CONFIG_ENV_VAR})",
        )
        _ = parser.add_argument(
            "--log-file",
            type=str,
            default=None,
            metavar="FILE",
            help="Also write a debug log to FILE",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> RunConfig:
        """Process command line arguments into the run configuration.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            RunConfig: Defaults overridden by the config file, then by flags.

        Raises:
            SystemExit: For --help, --version and usage errors.
            ConfigError: If the config file is missing or invalid.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        config_path = resolve_config_path(explicit_path=parsed_args.config)
        file_layer = load_config_file(config_path) if config_path is not None else {}
        cli_layer: dict[str, Any] = {
            f.name: getattr(parsed_args, f.name) for f in fields(RunConfig)
        }

        configuration = RunConfig.from_sources(file_layer, cli_layer)
        _ = setup_logger(
            log_file=configuration.log_file,
            console_level=verbosity_to_level(configuration.verbosity),
        )
        return configuration
