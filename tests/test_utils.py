import pytest

from releasemeta.exceptions import InvalidUrlError
from releasemeta.utils import filename_from_link, filename_from_url, format_bytes


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://cdn.example.com/files/The.Office.S02E05.720p.mkv", "The.Office.S02E05.720p.mkv"),
        ("https://cdn.example.com/files/The%20Office%20S02E05.mkv", "The Office S02E05.mkv"),
        ("https://cdn.example.com/files/Movie.2020.mkv?token=abc#frag", "Movie.2020.mkv"),
        ("  https://cdn.example.com/a/b/Film.mkv  ", "Film.mkv"),
    ],
)
def test_filename_from_url(url, expected):
    assert filename_from_url(url) == expected


@pytest.mark.parametrize(
    "url",
    [
        "",
        "not a url",
        "/files/Movie.mkv",
        "https://cdn.example.com/",
        "https://cdn.example.com/files/%FF.mkv",
    ],
)
def test_filename_from_url_rejects(url):
    with pytest.raises(InvalidUrlError):
        filename_from_url(url)


def test_filename_from_link_is_lenient():
    assert filename_from_link("https://cdn.example.com/") == ""
    assert filename_from_link("https://cdn.example.com/x/Film.mkv") == "Film.mkv"


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (1503238553, "1.4GB"),
        (943718400, "900MB"),
        (1024, "1KB"),
        (500, "500B"),
        (0, None),
        (None, None),
        (-5, None),
    ],
)
def test_format_bytes(size, expected):
    assert format_bytes(size) == expected
