# src/services/image_preview.py

"""Client-side file preview for the create form."""

import asyncio
import base64
import logging
import mimetypes
from pathlib import Path

from src.config.settings import Settings

logger = logging.getLogger("nft_market.preview")


class PreviewError(Exception):
    """Raised when a selected file cannot be previewed."""


def read_data_url(path: Path) -> str:
    """Read *path* and encode it as a ``data:`` URL.

    Raises ``PreviewError`` if the file is missing, is not an image or
    video, or exceeds ``PREVIEW_MAX_BYTES``.
    """
    if not path.is_file():
        raise PreviewError(f"File not found: {path}")

    mime, _ = mimetypes.guess_type(path.name)
    if mime is None or not mime.startswith(Settings.PREVIEW_ACCEPTED_TYPES):
        raise PreviewError(f"Unsupported file type: {path.name}")

    size = path.stat().st_size
    if size > Settings.PREVIEW_MAX_BYTES:
        raise PreviewError(
            f"{path.name} is {size} bytes, over the "
            f"{Settings.PREVIEW_MAX_BYTES} byte limit"
        )

    encoded = base64.b64encode(path.read_bytes()).decode("ascii")
    logger.debug("Encoded preview for %s (%d bytes)", path, size)
    return f"data:{mime};base64,{encoded}"


async def load_preview(path: str | Path) -> str:
    """Read a local file into a data URL without blocking the event loop."""
    target = Path(path).expanduser()
    try:
        return await asyncio.to_thread(read_data_url, target)
    except OSError as e:
        raise PreviewError(f"Could not read {target}: {e}") from e
