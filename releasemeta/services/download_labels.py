from typing import Optional, Union

from releasemeta.engine import LinkDetails, ReleaseParser, default_parser, generate_label
from releasemeta.engine.labels import DEFAULT_LABEL
from releasemeta.settings import settings
from releasemeta.utils import filename_from_link


def link_details(url: str, label: Optional[str] = None, parser: ReleaseParser = default_parser) -> LinkDetails:
    """Combine the link's file name and the admin label, then extract fields.

    Either half may be empty; an admin label such as "Hindi 1080p" fills in
    what a bare hosting URL cannot.
    """
    source = f"{filename_from_link(url)} {label or ''}".strip()
    return parser.inspect(source)


def download_label(
    url: str,
    label: Optional[str] = None,
    separator: Optional[str] = None,
    parser: ReleaseParser = default_parser,
) -> str:
    details = link_details(url, label, parser)
    return generate_label(details, separator or settings.label_language_separator)


def download_caption(
    url: str,
    label: Optional[str] = None,
    title: Optional[str] = None,
    year: Optional[Union[int, str]] = None,
    separator: Optional[str] = None,
    parser: ReleaseParser = default_parser,
) -> str:
    """Button caption for a stored link: ``"<title> (<year>) 1080p Hindi [1.4GB]"``.

    The year is shown only when the link is not an episode/season; without a
    title this is just the generated label.
    """
    details = link_details(url, label, parser)
    rendered = generate_label(details, separator or settings.label_language_separator)

    prefix = []
    if title:
        prefix.append(title.strip())
        if details.season is None and year and str(year) != "N/A":
            prefix.append(f"({year})")
    if not prefix:
        return rendered
    if rendered == DEFAULT_LABEL:
        return " ".join(prefix)
    return " ".join(prefix + [rendered])
