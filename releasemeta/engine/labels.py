from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

DEFAULT_LABEL = "Download"


def _field(fields: Any, name: str) -> Any:
    if isinstance(fields, Mapping):
        return fields.get(name)
    return getattr(fields, name, None)


def season_episode_tag(season: Optional[int], episode: Optional[int]) -> Optional[str]:
    if season is None:
        return None
    if episode is not None:
        return f"S{season:02d}E{episode:02d}"
    return f"Season {season:02d}"


def generate_label(fields: Any, separator: str = ", ") -> str:
    """Render a download-button caption from structured fields.

    ``fields`` is a mapping or any object exposing ``season``, ``episode``,
    ``quality``, ``languages`` and ``size``. Missing parts are skipped and an
    empty result falls back to ``"Download"``.

    >>> generate_label({"season": 1, "episode": 3, "quality": "1080p",
    ...                 "languages": ["Hindi"], "size": "900MB"})
    'S01E03 1080p Hindi [900MB]'
    """
    parts: List[str] = []

    tag = season_episode_tag(_field(fields, "season"), _field(fields, "episode"))
    if tag:
        parts.append(tag)

    quality = _field(fields, "quality")
    if quality:
        parts.append(quality)

    languages: Sequence[str] = _field(fields, "languages") or ()
    if languages:
        parts.append(separator.join(languages))

    size = _field(fields, "size")
    if size:
        parts.append(f"[{size}]")

    return " ".join(parts) if parts else DEFAULT_LABEL
