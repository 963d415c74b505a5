"""Main entry point for the sc-parser MCP server."""

import logging
import sys

from sc_parser import __version__
from sc_parser.logging_config import setup_logging
from sc_parser.server import main


def cli():
    """Console script entry point for the sc-parser MCP server."""
    setup_logging()

    logger = logging.getLogger("sc-parser")
    logger.info(f"Running sc-parser {__version__}. Press Ctrl+C to stop the server.")

    try:
        main()
    except KeyboardInterrupt:
        logger.info("sc-parser stopped by user")
        sys.exit(0)
    except Exception as e:
        logger.critical(f"Fatal error in sc-parser: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
