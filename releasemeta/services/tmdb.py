import httpx
from typing import Optional

from releasemeta.constants import tmdb_search_paths
from releasemeta.exceptions import UpstreamMetadataLookupFailure
from releasemeta.logger import logger
from releasemeta.settings import settings


def _year_from_result(result: dict) -> Optional[int]:
    date = result.get("release_date") or result.get("first_air_date") or ""
    head = str(date)[:4]
    if len(head) == 4 and head.isdigit():
        return int(head)
    return None


async def search_release_year(
    client: httpx.AsyncClient,
    title: str,
    media_type: str = "movie",
) -> Optional[int]:
    """Query TMDB search for ``title`` and return the first result's year.

    Raises:
        UpstreamMetadataLookupFailure: transport error, non-2xx status or an
            unreadable payload
    """
    path = tmdb_search_paths.get(media_type, tmdb_search_paths["movie"])
    params = {
        "api_key": settings.tmdb_api_key,
        "query": title,
        "language": settings.tmdb_language,
    }
    try:
        resp = await client.get(f"{settings.tmdb_base_url}{path}", params=params)
    except httpx.HTTPError as exc:
        raise UpstreamMetadataLookupFailure("tmdb", str(exc) or exc.__class__.__name__) from exc

    if resp.status_code >= 400:
        raise UpstreamMetadataLookupFailure("tmdb", f"HTTP {resp.status_code}", resp.status_code)

    try:
        payload = resp.json()
    except ValueError as exc:
        raise UpstreamMetadataLookupFailure("tmdb", "invalid JSON payload") from exc

    results = payload.get("results") if isinstance(payload, dict) else None
    if results is not None and not isinstance(results, list):
        raise UpstreamMetadataLookupFailure("tmdb", "unexpected payload")
    if not results:
        return None
    for result in results:
        if isinstance(result, dict):
            year = _year_from_result(result)
            if year is not None:
                return year
    return None


async def backfill_year(title: str, media_type: str = "movie") -> Optional[int]:
    """Best-effort year lookup; every failure is logged and swallowed."""
    if not settings.year_backfill_enabled:
        logger.debug("Year backfill disabled, skipping lookup for %r", title)
        return None
    try:
        async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
            year = await search_release_year(client, title, media_type)
    except UpstreamMetadataLookupFailure as exc:
        logger.warning("Year backfill for %r failed: %s", title, exc)
        return None
    if year is None:
        logger.info("TMDB returned no dated result for %r (%s)", title, media_type)
    return year
