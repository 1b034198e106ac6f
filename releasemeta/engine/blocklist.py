from __future__ import annotations

import re
from typing import Iterable, Pattern


def build_blocklist_pattern(names: Iterable[str]) -> Pattern[str]:
    """Compile one case-insensitive alternation over the literal channel names.

    Every name is added bare and with a leading "@". Alternatives are ordered
    longest first so "CineFlixHD" is consumed whole instead of leaving "HD"
    behind after "cineflix".
    """
    variants = set()
    for name in names:
        name = name.strip().lstrip("@")
        if not name:
            continue
        variants.add(name.lower())
        variants.add(f"@{name.lower()}")
    ordered = sorted(variants, key=lambda item: (-len(item), item))
    return re.compile("|".join(re.escape(item) for item in ordered), re.IGNORECASE)


class BlocklistMatcher:
    """Strips known uploader/channel tags from a release name."""

    def __init__(self, names: Iterable[str]):
        self.pattern = build_blocklist_pattern(names)

    def strip(self, text: str) -> str:
        # raw substring removal: group names are often glued to other tokens.
        # repeat until stable: removing an inner name can expose an outer one
        while True:
            stripped = self.pattern.sub("", text)
            if stripped == text:
                return stripped
            text = stripped

    def contains(self, text: str) -> bool:
        return self.pattern.search(text) is not None
