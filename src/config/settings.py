# src/config/settings.py

"""Central configuration for the nft_market application."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the nft_market application."""

    APP_NAME: str = "NFT Marketplace"

    # --- Image service (Unsplash) ---
    UNSPLASH_API_URL: str = "https://api.unsplash.com"
    UNSPLASH_ACCESS_KEY: str = os.getenv(
        "UNSPLASH_ACCESS_KEY", ""
    ) or "YOUR_UNSPLASH_ACCESS_KEY"
    PLACEHOLDER_IMAGE: str = "/placeholder.svg"
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"

    # Query / size pairs used by each page
    NFT_IMAGE_QUERY: str = "digital art nft"
    LISTING_IMAGE_COUNT: int = 6
    PROFILE_IMAGE_COUNT: int = 5
    DETAIL_IMAGE_SIZE: tuple[int, int] = (600, 600)
    BANNER_QUERY: str = "abstract art"
    BANNER_SIZE: tuple[int, int] = (1200, 400)
    AVATAR_QUERY: str = "profile picture"
    AVATAR_SIZE: tuple[int, int] = (200, 200)

    # --- Marketplace ---
    CURRENCIES: list[str] = ["ETH", "MATIC", "USDC"]
    COLLECTIONS: list[tuple[str, str]] = [
        ("Create new collection", "new"),
        ("Cosmic Series", "cosmic"),
        ("Pixel Art", "pixel"),
    ]
    TRENDING_MIN_LIKES: int = 20
    NEW_ITEMS_COUNT: int = 3

    # --- Create form ---
    ROYALTY_MIN: int = 0
    ROYALTY_MAX: int = 25
    ROYALTY_DEFAULT: int = 10
    PREVIEW_MAX_BYTES: int = 100 * 1024 * 1024   # 100 MB
    PREVIEW_ACCEPTED_TYPES: tuple[str, ...] = ("image/", "video/")

    # --- Wallet connection ---
    WALLET_CONNECT_PROJECT_ID: str = os.getenv(
        "WALLET_CONNECT_PROJECT_ID", ""
    ) or "YOUR_PROJECT_ID"
    CHAIN_ID: int = 1
    CHAIN_NAME: str = "Ethereum"
    CHAIN_RPC_URL: str = "https://eth.merkle.io"
    DEFAULT_WALLETS: list[str] = [
        "Rainbow",
        "Coinbase Wallet",
        "MetaMask",
        "WalletConnect",
    ]
    QUERY_STALE_TIME: float = 60.0      # QueryClient freshness (secs)

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = BASE_DIR / "logs"
