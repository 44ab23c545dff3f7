"""
Blog Backend Entry Point
Serves the article upvote/comment API from memory or MongoDB.
"""
import argparse
import logging
import sys

from blog_app import create_app
from blog_app.config import Config, ConfigurationError


def setup_logging(verbose: bool = False):
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else getattr(logging, Config.LOG_LEVEL, logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def main():
    """Run the blog backend"""
    parser = argparse.ArgumentParser(
        description='Blog backend - article upvotes and comments'
    )

    parser.add_argument(
        '--backend',
        choices=['memory', 'mongo'],
        default=None,
        help='Storage backend (default: BLOG_BACKEND or mongo)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging (DEBUG level)'
    )

    args = parser.parse_args()

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    if args.backend:
        Config.BACKEND = args.backend

    try:
        Config.validate()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    app = create_app()
    port = int(Config.PORT)

    logger.info(f"Listening on Port {port}")
    app.run(
        host=Config.HOST,
        port=port,
        debug=Config.DEBUG,
        use_reloader=Config.DEBUG
    )


if __name__ == '__main__':
    main()
