# main.py

"""Entry point for the nft_market application (TUI or headless listing)."""

import argparse
import asyncio
import logging
import sys

from src.config.logging_config import setup_logging
from src.services.image_provider import (
    ImageProvider,
    SeededImageProvider,
    UnsplashImageProvider,
)
from src.services.wallet_provider import WalletProvider

logger = logging.getLogger("nft_market.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    from src.cli.runner import TAB_IDS

    parser = argparse.ArgumentParser(
        prog="nft_market",
        description="Terminal NFT marketplace demo.",
        epilog="Routes: /, /create, /nft/<id>, /profile",
    )
    parser.add_argument(
        "-r",
        "--route",
        default="/",
        help="Page to open first (default: /).",
    )
    parser.add_argument(
        "-l",
        "--list",
        choices=TAB_IDS,
        default=None,
        dest="list_tab",
        help="Print a listing tab as a table and exit.",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        default=False,
        help="Use deterministic placeholder images instead of Unsplash.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Seed for --offline images (default: 0).",
    )
    return parser


def _build_images(args: argparse.Namespace) -> ImageProvider:
    """Pick the image source for this run."""
    if args.offline:
        logger.info("Offline mode, image seed %d", args.seed)
        return SeededImageProvider(args.seed)
    return UnsplashImageProvider()


def _run_tui(images: ImageProvider, route: str) -> None:
    """Launch the interactive Textual TUI."""
    from src.ui.app import NFTMarketApp

    wallet = WalletProvider()
    try:
        app = NFTMarketApp(images=images, wallet=wallet, initial_route=route)
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("nft_market TUI shutting down")


def _run_list(images: ImageProvider, tab: str) -> None:
    """Print one listing tab and exit."""
    from src.cli.runner import list_tab

    exit_code = asyncio.run(list_tab(tab, images))
    sys.exit(exit_code)


def main() -> None:
    """Route to the TUI (default) or the headless listing."""
    parser = _build_parser()
    args = parser.parse_args()

    # The TUI renders on stderr; only headless runs get console logging
    log_file = setup_logging(console=args.list_tab is not None)
    logger.info("nft_market starting, log file: %s", log_file)
    images = _build_images(args)

    if args.list_tab is not None:
        _run_list(images, args.list_tab)
    else:
        _run_tui(images, args.route)


if __name__ == "__main__":
    main()
