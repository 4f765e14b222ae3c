# tests/test_settings.py

"""Tests for the Settings configuration class."""

import unittest
from pathlib import Path

from src.config.settings import Settings


class TestSettings(unittest.TestCase):
    """Verify Settings constants."""

    def test_placeholder_is_fixed_path(self) -> None:
        """The fallback image is the exact placeholder path."""
        self.assertEqual(Settings.PLACEHOLDER_IMAGE, "/placeholder.svg")

    def test_credentials_never_empty(self) -> None:
        """Unset credentials fall back to non-empty defaults."""
        self.assertTrue(Settings.UNSPLASH_ACCESS_KEY)
        self.assertTrue(Settings.WALLET_CONNECT_PROJECT_ID)

    def test_currencies(self) -> None:
        """The form offers ETH, MATIC and USDC, in that order."""
        self.assertEqual(Settings.CURRENCIES, ["ETH", "MATIC", "USDC"])

    def test_royalty_bounds(self) -> None:
        """Default royalty sits inside the 0-25 range."""
        self.assertEqual(Settings.ROYALTY_MIN, 0)
        self.assertEqual(Settings.ROYALTY_MAX, 25)
        self.assertEqual(Settings.ROYALTY_DEFAULT, 10)

    def test_collection_values_unique(self) -> None:
        """No duplicate collection values in the create form."""
        values = [value for _, value in Settings.COLLECTIONS]
        self.assertEqual(len(values), len(set(values)))
        self.assertIn("new", values)

    def test_image_counts_cover_sample_data(self) -> None:
        """Enough images are requested for every sample entry."""
        self.assertEqual(Settings.LISTING_IMAGE_COUNT, 6)
        self.assertEqual(Settings.PROFILE_IMAGE_COUNT, 5)

    def test_single_chain(self) -> None:
        """The wallet context is scoped to Ethereum mainnet."""
        self.assertEqual(Settings.CHAIN_ID, 1)
        self.assertTrue(Settings.CHAIN_RPC_URL.startswith("https://"))

    def test_path_constants_are_paths(self) -> None:
        """Path-typed settings are Path instances."""
        self.assertIsInstance(Settings.BASE_DIR, Path)
        self.assertIsInstance(Settings.LOGS_DIR, Path)

    def test_impersonate_browser_is_string(self) -> None:
        """IMPERSONATE_BROWSER must be a non-empty string."""
        self.assertIsInstance(Settings.IMPERSONATE_BROWSER, str)
        self.assertTrue(len(Settings.IMPERSONATE_BROWSER) > 0)


if __name__ == "__main__":
    unittest.main()
