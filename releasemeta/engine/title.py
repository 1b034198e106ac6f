from __future__ import annotations

import logging
import re
from typing import Iterable, Optional, Pattern

from releasemeta.engine.models import Found
from releasemeta.engine.tables import ReleaseTables
from releasemeta.exceptions import EmptyTitleError

log = logging.getLogger(__name__)

NON_ALPHANUMERIC_PATTERN = re.compile(r"[^\w\s]|_")
WHITESPACE_PATTERN = re.compile(r"\s+")


def build_spam_pattern(words: Iterable[str]) -> Pattern[str]:
    ordered = sorted(set(words), key=lambda item: (-len(item), item))
    return re.compile(r"\b(?:" + "|".join(re.escape(word) for word in ordered) + r")\b", re.IGNORECASE)


def title_end_index(*hits: object) -> Optional[int]:
    """Smallest offset among the year and season/episode hits, if any.

    Quality and language hits are never passed in here: only a year or an
    episode marker ends the title.
    """
    offsets = [hit.offset for hit in hits if isinstance(hit, Found)]
    if not offsets:
        return None
    return min(offsets)


def resolve_title(text: str, end_index: Optional[int], tables: ReleaseTables) -> str:
    if end_index is not None:
        title = text[:end_index].strip()
    else:
        tokens = text.split(" ")
        # index 0 is always title, a one-word name is never a keyword
        cut = next(
            (i for i in range(1, len(tokens)) if tokens[i].lower() in tables.title_stop_keywords),
            None,
        )
        title = " ".join(tokens[:cut]).strip() if cut is not None else text.strip()
    if not title:
        raise EmptyTitleError(text)
    return title


def cleanup_title(title: str, spam_pattern: Pattern[str]) -> str:
    cleaned = spam_pattern.sub(" ", title)
    cleaned = NON_ALPHANUMERIC_PATTERN.sub(" ", cleaned)
    cleaned = WHITESPACE_PATTERN.sub(" ", cleaned).strip()
    if not cleaned:
        log.debug("Title %r emptied by cleanup", title)
        raise EmptyTitleError(title)
    return " ".join(word.capitalize() for word in cleaned.split(" "))
