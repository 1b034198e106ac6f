from __future__ import annotations

import logging
from typing import Optional

from releasemeta.engine.blocklist import BlocklistMatcher
from releasemeta.engine.extractors import (
    extract_languages,
    extract_quality,
    extract_season_episode,
    extract_year,
)
from releasemeta.engine.models import Found, LinkDetails, NormalizedName, ParsedMetadata
from releasemeta.engine.normalizer import normalize
from releasemeta.engine.tables import DEFAULT_TABLES, ReleaseTables
from releasemeta.engine.title import build_spam_pattern, cleanup_title, resolve_title, title_end_index

log = logging.getLogger(__name__)


def _value(hit):
    return hit.value if isinstance(hit, Found) else None


class ReleaseParser:
    """Extracts title, year, season/episode, quality, languages and size
    from a release file name.

    Holds only compiled patterns derived from ``tables``; instances are safe
    to share between threads and requests.
    """

    def __init__(self, tables: ReleaseTables = DEFAULT_TABLES, current_year: Optional[int] = None):
        self.tables = tables
        # pinned for tests; None means "today"
        self.current_year = current_year
        self.blocklist = BlocklistMatcher(tables.channel_names)
        self.spam_pattern = build_spam_pattern(tables.spam_words)

    def normalize(self, raw: str) -> NormalizedName:
        return normalize(raw, self.blocklist)

    def parse(self, raw: str) -> ParsedMetadata:
        """Parse one release name.

        Raises :class:`~releasemeta.exceptions.EmptyTitleError` when no title
        survives boundary resolution and cleanup.
        """
        name = self.normalize(raw)
        text = name.text

        year = extract_year(text, self.current_year)
        season_episode = extract_season_episode(text)
        quality = extract_quality(text)
        languages = extract_languages(text, self.tables)

        end_index = title_end_index(year, season_episode.season, season_episode.episode)
        title = resolve_title(text, end_index, self.tables)
        title = cleanup_title(title, self.spam_pattern)

        result = ParsedMetadata(
            title=title,
            year=_value(year),
            season=_value(season_episode.season),
            episode=_value(season_episode.episode),
            quality=_value(quality),
            languages=languages,
            size=name.size,
        )
        log.debug("Parsed %r -> %r", raw, result)
        return result

    def inspect(self, source: str) -> LinkDetails:
        """Quality, languages, size and season/episode without a title.

        Used for download labels, where ``source`` is a file name with an
        admin label appended and may not contain a title at all.
        """
        name = self.normalize(source)
        season_episode = extract_season_episode(name.text)
        return LinkDetails(
            quality=_value(extract_quality(name.text)),
            languages=extract_languages(name.text, self.tables),
            size=name.size,
            season=_value(season_episode.season),
            episode=_value(season_episode.episode),
        )


default_parser = ReleaseParser()


def parse(raw: str) -> ParsedMetadata:
    return default_parser.parse(raw)


def inspect(source: str) -> LinkDetails:
    return default_parser.inspect(source)
