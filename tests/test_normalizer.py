import pytest

from releasemeta.engine import DEFAULT_TABLES
from releasemeta.engine.blocklist import BlocklistMatcher
from releasemeta.engine.normalizer import extract_size, normalize

matcher = BlocklistMatcher(DEFAULT_TABLES.channel_names)


def test_normalize_release_name():
    name = normalize("Kung.Fu.Panda.4.2024.1080p.WEB-DL.Hindi-English.1.4GB.mkv", matcher)
    assert name.text == "Kung Fu Panda 4 2024 1080p WEB DL Hindi English 1 4GB"
    assert name.size == "1.4GB"


def test_size_is_read_before_dots_are_split():
    name = normalize("Movie.Name.2023.1.5GB.mkv", matcher)
    assert name.size == "1.5GB"
    assert "1.5GB" not in name.text


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Movie 2020 700 MB.mp4", "700MB"),
        ("movie.2020.1.2gb.mkv", "1.2GB"),
        ("Movie.2020.x264.450mb", "450MB"),
        ("Movie_Name_2023_1.5GB_x264.mkv", "1.5GB"),
        ("Movie.2020.1080p.mkv", None),
        ("Movie.2020.100mbps", None),
    ],
)
def test_extract_size(raw, expected):
    assert extract_size(raw) == expected


def test_bracketed_tags_and_extension_removed():
    name = normalize("[TGx] Movie.Name.2020.[Hindi].720p.mkv", matcher)
    assert name.text == "Movie Name 2020 720p"


def test_only_known_extensions_are_stripped():
    assert normalize("Movie.Name.2023", matcher).text == "Movie Name 2023"
    assert normalize("Movie.2023.Hindi.Eng", matcher).text == "Movie 2023 Hindi Eng"


def test_glued_channel_tag_removed():
    name = normalize("Pushpa.2.The.Rule.2024.Hindi.720p.WEB-DL.x264@CineFlixHD.mkv", matcher)
    assert name.text == "Pushpa 2 The Rule 2024 Hindi 720p WEB DL x264"


def test_channel_only_name_normalizes_to_empty():
    assert normalize("@CineFlixHD.mkv", matcher).text == ""


@pytest.mark.parametrize(
    "raw",
    [
        "Kung.Fu.Panda.4.2024.1080p.WEB-DL.Hindi-English.1.4GB.mkv",
        "The.Office.S02E05.720p.HDTV.x264-GROUP.mkv",
        "[TGx] Dune (2021) + Extras _ 1080p.mp4",
        "  spaced   out  name  ",
    ],
)
def test_normalize_is_idempotent(raw):
    once = normalize(raw, matcher).text
    assert normalize(once, matcher).text == once


def test_blocklist_prefers_longest_name():
    assert matcher.strip("CineFlixHD") == ""
    assert matcher.strip("cineflix") == ""
    assert matcher.strip("Movie@MovieFlixHD") == "Movie"
    assert matcher.contains("some.vegamovies.tag")
    assert not matcher.contains("The Office")


def test_blocklist_is_case_insensitive():
    assert matcher.strip("FILMYZILLA.Movie") == ".Movie"


def test_nested_channel_names_stripped_until_stable():
    assert matcher.strip("cinecineflixflix") == ""
    name = normalize("Movie.2020.cinecineflixflix.mkv", matcher)
    assert name.text == "Movie 2020"
    assert normalize(name.text, matcher).text == name.text
