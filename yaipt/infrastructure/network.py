from __future__ import annotations

import io
import logging
import time
from typing import Callable

import requests
from PIL import Image as PILImage

from ..config import APP_VERSION, SETTINGS
from ..errors import SourceError
from ..processing.pixels import RawImage
from .surface import Surface

LOGGER = logging.getLogger(__name__)

SessionFactory = Callable[[], requests.Session]


class SourceFetcher:
    def __init__(self, session_factory: SessionFactory | None = None) -> None:
        self._session_factory = session_factory or requests.Session
        self._session = self._create_session()

    def _create_session(self) -> requests.Session:
        session = self._session_factory()
        session.headers.update({"User-Agent": f"yaipt/{APP_VERSION}"})
        return session

    def fetch_source(self, source_url: str | None = None) -> RawImage:
        target_url = source_url or SETTINGS.source_url
        last_exception: Exception | None = None
        for attempt in range(1, SETTINGS.retries + 2):
            try:
                response = self._session.get(target_url, timeout=SETTINGS.timeout)
                response.raise_for_status()
                with PILImage.open(io.BytesIO(response.content)) as decoded:
                    return Surface.from_pil(decoded).read()
            except (requests.RequestException, OSError) as exc:
                last_exception = exc
                LOGGER.warning("Fetching %s failed (attempt %d): %s", target_url, attempt, exc)
                time.sleep(0.4 * attempt)
        raise SourceError(f"Could not fetch {target_url}: {last_exception}")


FETCHER = SourceFetcher()
