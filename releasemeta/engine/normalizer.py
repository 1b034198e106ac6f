from __future__ import annotations

import re
from typing import Optional

from releasemeta.engine.blocklist import BlocklistMatcher
from releasemeta.engine.models import NormalizedName

SIZE_PATTERN = re.compile(r"(?<![A-Za-z\d])(\d+(?:\.\d+)?)\s?(gb|mb)(?![A-Za-z\d])", re.IGNORECASE)
MEDIA_EXTENSIONS = (
    "mkv", "mp4", "avi", "m4v", "mov", "wmv", "flv", "webm", "ts", "m2ts", "mpg", "mpeg",
    "vob", "iso", "rmvb", "3gp", "mka", "mp3", "aac", "flac", "srt", "ass", "zip", "rar", "7z",
)
EXTENSION_PATTERN = re.compile(r"\.(?:" + "|".join(MEDIA_EXTENSIONS) + r")$", re.IGNORECASE)
BRACKETED_PATTERN = re.compile(r"\[[^\]]*\]")
SEPARATOR_PATTERN = re.compile(r"[._()+\-]")
WHITESPACE_PATTERN = re.compile(r"\s+")


def extract_size(raw: str) -> Optional[str]:
    """Return the size literal from an untouched release name, e.g. ``"1.5GB"``."""
    match = SIZE_PATTERN.search(raw or "")
    if not match:
        return None
    return f"{match.group(1)}{match.group(2).upper()}"


def collapse_separators(text: str) -> str:
    text = SEPARATOR_PATTERN.sub(" ", text)
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def normalize(raw: str, matcher: BlocklistMatcher) -> NormalizedName:
    """Turn a raw release name into a space-delimited token string.

    The size is read from the raw input before anything else: dropping the
    extension or splitting on dots would break literals like ``1.5GB``.
    """
    raw = raw or ""
    size = extract_size(raw)

    working = EXTENSION_PATTERN.sub("", raw.strip())
    working = BRACKETED_PATTERN.sub("", working)
    working = matcher.strip(working)
    return NormalizedName(text=collapse_separators(working), size=size)
