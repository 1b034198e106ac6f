"""Independent field scanners over a normalized release name.

Each scanner returns a tagged result (:class:`Found` with the match offset, or
``NOT_FOUND``) so the title resolver can decide where metadata starts without
re-running any pattern.
"""

from __future__ import annotations

import datetime
import re
from typing import List, Mapping, Optional, Tuple

from releasemeta.engine.models import NOT_FOUND, Extracted, Found, SeasonEpisode
from releasemeta.engine.tables import ReleaseTables

YEAR_PATTERN = re.compile(r"\b(19\d{2}|20\d{2})\b")

_SEP = r"[\s._-]?"
SEASON_EPISODE_PATTERN = re.compile(
    r"\b(?:season|series|part|s)" + _SEP + r"(\d{1,2})"
    r"[\s._x-]?(?:episode|ep|e)?" + _SEP + r"(\d{1,3})\b",
    re.IGNORECASE,
)
CROSS_PATTERN = re.compile(r"\b(\d{1,2})x(\d{1,3})\b", re.IGNORECASE)
SEASON_PATTERN = re.compile(r"\b(?:season|series|part|s)" + _SEP + r"(\d{1,2})\b", re.IGNORECASE)
EPISODE_PATTERN = re.compile(r"\b(?:episode|ep|e)" + _SEP + r"(\d{1,3})\b", re.IGNORECASE)
QUALITY_PATTERN = re.compile(r"\b(4k|2160p|1080p|720p|480p)\b", re.IGNORECASE)


def year_ceiling(current_year: Optional[int] = None) -> int:
    if current_year is None:
        current_year = datetime.date.today().year
    return current_year + 5


def is_plausible_year(year: int, current_year: Optional[int] = None) -> bool:
    return 1900 < year < year_ceiling(current_year)


def extract_year(text: str, current_year: Optional[int] = None) -> Extracted[int]:
    """First plausible release year in ``text``, wherever it sits.

    A name that starts with its year ("2012.1080p") leaves no title and the
    parser reports it as such.
    """
    for match in YEAR_PATTERN.finditer(text):
        year = int(match.group(1))
        if is_plausible_year(year, current_year):
            return Found(match.start(), year)
    return NOT_FOUND


def extract_season_episode(text: str) -> SeasonEpisode:
    for pattern in (SEASON_EPISODE_PATTERN, CROSS_PATTERN):
        match = pattern.search(text)
        if match:
            offset = match.start()
            return SeasonEpisode(
                season=Found(offset, int(match.group(1))),
                episode=Found(offset, int(match.group(2))),
            )

    # neither combined form matched: look for each half on its own
    season: Extracted[int] = NOT_FOUND
    episode: Extracted[int] = NOT_FOUND
    match = SEASON_PATTERN.search(text)
    if match:
        season = Found(match.start(), int(match.group(1)))
    match = EPISODE_PATTERN.search(text)
    if match:
        episode = Found(match.start(), int(match.group(1)))
    return SeasonEpisode(season=season, episode=episode)


def canonical_quality(tag: str) -> str:
    tag = tag.lower()
    if tag == "4k":
        return "4K"
    return tag


def extract_quality(text: str) -> Extracted[str]:
    match = QUALITY_PATTERN.search(text)
    if not match:
        return NOT_FOUND
    return Found(match.start(), canonical_quality(match.group(1)))


def extract_languages(text: str, tables: ReleaseTables) -> Tuple[str, ...]:
    """Audio languages in first-seen order.

    ``eng sub``/``eng subs`` and ``esub``/``esubs`` mark subtitles and are
    skipped rather than reported as English audio.
    """
    languages: List[str] = []
    language_map: Mapping[str, str] = tables.languages
    tokens = [token.lower() for token in text.split()]
    index = 0
    while index < len(tokens):
        token = tokens[index]
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        if token == tables.subtitle_prefix and following in tables.subtitle_suffixes:
            index += 2
            continue
        if token in tables.subtitle_markers:
            index += 1
            continue
        language = language_map.get(token)
        if language and language not in languages:
            languages.append(language)
        index += 1
    return tuple(languages)
