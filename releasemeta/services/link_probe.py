import httpx
from typing import Optional

from releasemeta.logger import logger
from releasemeta.settings import settings
from releasemeta.utils import format_bytes


async def probe_link_size(url: str) -> Optional[str]:
    """HEAD the download link and format its Content-Length.

    Returns None when the server does not answer, errors, or sends no usable
    length.
    """
    try:
        async with httpx.AsyncClient(follow_redirects=True, timeout=settings.request_timeout) as client:
            resp = await client.head(url)
    except httpx.HTTPError as exc:
        logger.warning(f"Could not fetch HEAD for {url}: {exc}")
        return None

    if resp.status_code >= 400:
        logger.debug(f"HEAD {url} returned {resp.status_code}")
        return None

    raw_length = resp.headers.get("content-length")
    try:
        length = int(raw_length) if raw_length else 0
    except (TypeError, ValueError):
        logger.debug(f"Ignoring malformed Content-Length {raw_length!r} for {url}")
        return None
    return format_bytes(length)
