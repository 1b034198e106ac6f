import urllib.parse
from typing import Optional

from releasemeta.exceptions import InvalidUrlError


def filename_from_url(url: str) -> str:
    """Return the decoded last path segment of a download URL.

    Args:
        url: Absolute http(s) URL pointing at a file

    Returns:
        Percent-decoded file name

    Raises:
        InvalidUrlError: no scheme/host, empty last segment, or the segment
            is not valid percent-encoded UTF-8
    """
    raw_url = (url or "").strip()
    try:
        parsed = urllib.parse.urlparse(raw_url)
    except ValueError as exc:
        raise InvalidUrlError(raw_url, str(exc)) from exc
    if not parsed.scheme or not parsed.netloc:
        raise InvalidUrlError(raw_url, "not an absolute URL")

    segment = parsed.path.rsplit("/", 1)[-1]
    if not segment:
        raise InvalidUrlError(raw_url, "could not extract filename from URL")
    try:
        filename = urllib.parse.unquote(segment, errors="strict")
    except UnicodeDecodeError as exc:
        raise InvalidUrlError(raw_url, "filename is not valid percent-encoding") from exc
    if not filename.strip():
        raise InvalidUrlError(raw_url, "could not extract filename from URL")
    return filename


def filename_from_link(url: str) -> str:
    """Lenient variant for stored links: empty string instead of an error."""
    try:
        return filename_from_url(url)
    except InvalidUrlError:
        return ""


def format_bytes(size_in_bytes: Optional[int], decimals: int = 2) -> Optional[str]:
    """Render a byte count the way release names spell sizes, e.g. ``1.4GB``."""
    if not size_in_bytes or size_in_bytes <= 0:
        return None
    units = ["B", "KB", "MB", "GB", "TB"]
    value = float(size_in_bytes)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    return f"{round(value, max(decimals, 0)):g}{units[index]}"
