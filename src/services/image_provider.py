# src/services/image_provider.py

"""Stock-photo lookups that always degrade to a placeholder URL."""

import logging
import random
from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import urlparse

from curl_cffi import requests as curl_requests

from src.config.settings import Settings

logger = logging.getLogger("nft_market.images")

DEFAULT_QUERY = "digital art"
DEFAULT_SIZE = 400


def is_valid_image_url(url: str) -> bool:
    """Return True for absolute http(s) URLs with a host."""
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class ImageProvider(ABC):
    """Source of image URLs for catalogue entries and profiles."""

    placeholder: str = Settings.PLACEHOLDER_IMAGE

    @abstractmethod
    def fetch_one(
        self,
        query: str = DEFAULT_QUERY,
        width: int = DEFAULT_SIZE,
        height: int = DEFAULT_SIZE,
    ) -> str:
        """Return one image URL, or the placeholder on any failure."""
        ...

    @abstractmethod
    def fetch_many(
        self,
        count: int = 1,
        query: str = DEFAULT_QUERY,
        width: int = DEFAULT_SIZE,
        height: int = DEFAULT_SIZE,
    ) -> list[str]:
        """Return exactly *count* image URLs (placeholders on failure)."""
        ...


class UnsplashImageProvider(ImageProvider):
    """Random photos from the Unsplash API.

    Results are randomised by Unsplash, so identical calls may return
    different images. Nothing is cached or retried.
    """

    def __init__(self, access_key: str | None = None) -> None:
        self.access_key = access_key or Settings.UNSPLASH_ACCESS_KEY
        self.endpoint = f"{Settings.UNSPLASH_API_URL}/photos/random"
        self.session = curl_requests.Session(
            impersonate=Settings.IMPERSONATE_BROWSER
        )

    def _request_photos(
        self, query: str, count: int,
    ) -> list[dict[str, Any]] | None:
        """Call the random-photo endpoint; None on any error shape."""
        resp = self.session.get(
            self.endpoint,
            params={
                "query": query,
                "orientation": "landscape",
                "count": count,
            },
            headers={
                "Authorization": f"Client-ID {self.access_key}",
                "Accept-Version": "v1",
            },
        )
        if resp.status_code != 200:
            logger.error(
                "Unsplash returned HTTP %d for '%s'",
                resp.status_code,
                query,
            )
            return None

        body: Any = resp.json()
        if isinstance(body, dict) and "errors" in body:
            logger.error(
                "Unsplash error response for '%s': %s",
                query,
                body["errors"],
            )
            return None

        # count=1 comes back as a one-element list, but accept an object too
        if isinstance(body, dict):
            return [body]
        if isinstance(body, list):
            return [p for p in body if isinstance(p, dict)]

        logger.error("Unexpected Unsplash payload for '%s'", query)
        return None

    def _photo_url(
        self, photo: dict[str, Any], width: int, height: int,
    ) -> str:
        """Build a cropped URL from a photo's raw URL."""
        urls = photo.get("urls")
        raw = urls.get("raw") if isinstance(urls, dict) else None
        if not isinstance(raw, str) or not is_valid_image_url(raw):
            logger.warning("Photo without usable raw URL: %r", raw)
            return self.placeholder
        return f"{raw}&w={width}&h={height}&fit=crop"

    def fetch_one(
        self,
        query: str = DEFAULT_QUERY,
        width: int = DEFAULT_SIZE,
        height: int = DEFAULT_SIZE,
    ) -> str:
        """Return one random image URL for *query*."""
        try:
            photos = self._request_photos(query, 1)
            if not photos:
                return self.placeholder
            return self._photo_url(photos[0], width, height)
        except Exception as e:
            logger.error(
                "Error fetching image for '%s': %s",
                query,
                e,
                exc_info=True,
            )
            return self.placeholder

    def fetch_many(
        self,
        count: int = 1,
        query: str = DEFAULT_QUERY,
        width: int = DEFAULT_SIZE,
        height: int = DEFAULT_SIZE,
    ) -> list[str]:
        """Return *count* random image URLs for *query*.

        Missing positions in a short response are filled with the
        placeholder so callers can always index positionally.
        """
        if count <= 0:
            return []
        try:
            photos = self._request_photos(query, count)
        except Exception as e:
            logger.error(
                "Error fetching %d images for '%s': %s",
                count,
                query,
                e,
                exc_info=True,
            )
            photos = None

        if photos is None:
            return [self.placeholder] * count

        urls = [
            self._photo_url(photo, width, height)
            for photo in photos[:count]
        ]
        if len(urls) < count:
            logger.warning(
                "Unsplash returned %d of %d images for '%s'",
                len(urls),
                count,
                query,
            )
            urls.extend([self.placeholder] * (count - len(urls)))
        return urls


class SeededImageProvider(ImageProvider):
    """Deterministic offline provider, reproducible for a given seed."""

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def _next_url(self, width: int, height: int) -> str:
        token = f"{self._rng.getrandbits(32):08x}"
        return f"https://picsum.photos/seed/{token}/{width}/{height}"

    def fetch_one(
        self,
        query: str = DEFAULT_QUERY,
        width: int = DEFAULT_SIZE,
        height: int = DEFAULT_SIZE,
    ) -> str:
        """Return the next seeded URL; *query* is ignored."""
        return self._next_url(width, height)

    def fetch_many(
        self,
        count: int = 1,
        query: str = DEFAULT_QUERY,
        width: int = DEFAULT_SIZE,
        height: int = DEFAULT_SIZE,
    ) -> list[str]:
        """Return the next *count* seeded URLs."""
        return [self._next_url(width, height) for _ in range(max(count, 0))]
