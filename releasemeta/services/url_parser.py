from dataclasses import replace

from releasemeta.engine import ParsedMetadata, ReleaseParser, default_parser
from releasemeta.engine.extractors import is_plausible_year
from releasemeta.logger import logger
from releasemeta.services import link_probe, tmdb
from releasemeta.settings import settings
from releasemeta.utils import filename_from_url


async def parse_download_url(url: str, parser: ReleaseParser = default_parser) -> ParsedMetadata:
    """Parse the file name of ``url`` and fill gaps from the network.

    Args:
        url: Download link pasted by an administrator
        parser: Engine instance, the shared default unless a test pins one

    Returns:
        ParsedMetadata; size may come from a HEAD probe and year from TMDB

    Raises:
        InvalidUrlError: the URL has no usable file name
        EmptyTitleError: the file name yields no title
    """
    filename = filename_from_url(url)
    result = parser.parse(filename)
    logger.info(f"Parsed {filename!r}: title={result.title!r} year={result.year}")

    if result.size is None and settings.probe_link_size and not settings.testing:
        size = await link_probe.probe_link_size(url)
        if size:
            result = replace(result, size=size)

    if result.year is None:
        media_type = "tv" if result.season is not None or result.episode is not None else "movie"
        year = await tmdb.backfill_year(result.title, media_type)
        if year is not None and is_plausible_year(year, parser.current_year):
            result = replace(result, year=year)

    return result
