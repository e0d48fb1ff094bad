"""Command line interface for tagsort."""

import sys
from typing import final

from tagsort.application.services import SortService
from tagsort.config import ConfigError
from tagsort.features.placement import TargetRootMissingError
from tagsort.platform.logging import logger
from tagsort.ui.cli.args import ArgumentParser
from tagsort.ui.cli.display import SummaryDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments and run the sort.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            config = ArgumentParser.process_args(args_list)
            summary = SortService(config).run()
            if config.verbosity >= 1:
                SummaryDisplay().show_summary(summary, dry_run=config.dry_run)

        except ConfigError as e:
            logger.error("%s", e)
            sys.exit(2)
        except TargetRootMissingError as e:
            logger.error("%s", e)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures leave through
        ``sys.exit`` inside ``CommandProcessor.process_command``.
    """
    CommandProcessor.process_command()
    return 0
