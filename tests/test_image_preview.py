# tests/test_image_preview.py

"""Tests for local file preview encoding."""

import base64
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from src.config.settings import Settings
from src.services.image_preview import PreviewError, load_preview, read_data_url

_PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-body"


class TestReadDataUrl(unittest.TestCase):
    """Synchronous encoding rules."""

    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.dir = Path(self.tmp.name)

    def _write(self, name: str, data: bytes = _PNG_BYTES) -> Path:
        path = self.dir / name
        path.write_bytes(data)
        return path

    def test_png_becomes_data_url(self) -> None:
        """Image bytes are base64-encoded with their mime type."""
        url = read_data_url(self._write("art.png"))
        expected = base64.b64encode(_PNG_BYTES).decode("ascii")
        self.assertEqual(url, f"data:image/png;base64,{expected}")

    def test_video_accepted(self) -> None:
        url = read_data_url(self._write("clip.mp4", b"\x00\x00"))
        self.assertTrue(url.startswith("data:video/mp4;base64,"))

    def test_missing_file(self) -> None:
        with self.assertRaises(PreviewError):
            read_data_url(self.dir / "nope.png")

    def test_unsupported_type(self) -> None:
        """Non-image, non-video files are rejected."""
        with self.assertRaises(PreviewError):
            read_data_url(self._write("notes.txt", b"hello"))

    def test_oversized_file(self) -> None:
        """Files over the size limit are rejected."""
        path = self._write("big.png")
        with patch.object(Settings, "PREVIEW_MAX_BYTES", 4):
            with self.assertRaises(PreviewError):
                read_data_url(path)


class TestLoadPreview(unittest.IsolatedAsyncioTestCase):
    """Async wrapper used by the create form."""

    async def test_loads_from_string_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "art.gif"
            path.write_bytes(b"GIF89a")
            url = await load_preview(str(path))
        self.assertTrue(url.startswith("data:image/gif;base64,"))

    async def test_failure_is_preview_error(self) -> None:
        with self.assertRaises(PreviewError):
            await load_preview("/definitely/not/here.png")


if __name__ == "__main__":
    unittest.main()
