# tests/test_cli_runner.py

"""Tests for the headless listing output."""

import io
import unittest

from rich.console import Console

from src.cli.runner import TAB_IDS, build_table, list_tab
from src.services.catalogue_service import sample_catalogue
from src.services.image_provider import SeededImageProvider


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=250, color_system=None), buffer


class TestBuildTable(unittest.TestCase):

    def test_row_per_entry(self) -> None:
        nfts = sample_catalogue(["u"] * 6)
        table = build_table("All NFTs", nfts)
        self.assertEqual(table.row_count, 6)
        self.assertEqual(str(table.title), "All NFTs (6)")


class TestListTab(unittest.IsolatedAsyncioTestCase):
    """list_tab exit codes and output."""

    async def test_hot_tab_output(self) -> None:
        console, buffer = _console()
        code = await list_tab("hot", SeededImageProvider(), console)
        out = buffer.getvalue()
        self.assertEqual(code, 0)
        self.assertIn("Cosmic Voyager #42", out)
        self.assertIn("Neon Genesis #15", out)
        self.assertNotIn("Pixel Punk #103", out)

    async def test_unknown_tab_fails(self) -> None:
        console, buffer = _console()
        code = await list_tab("sold", SeededImageProvider(), console)
        self.assertEqual(code, 1)
        self.assertIn("Unknown tab", buffer.getvalue())

    async def test_tab_ids(self) -> None:
        self.assertEqual(TAB_IDS, ["all", "trending", "hot", "new"])


if __name__ == "__main__":
    unittest.main()
