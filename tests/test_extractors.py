import datetime

import pytest

from releasemeta.engine import DEFAULT_TABLES, NOT_FOUND, Found
from releasemeta.engine.extractors import (
    extract_languages,
    extract_quality,
    extract_season_episode,
    extract_year,
)


def test_extract_year_records_offset():
    assert extract_year("Kung Fu Panda 4 2024 1080p", current_year=2026) == Found(16, 2024)


@pytest.mark.parametrize("year", [1901, 1955, 1999, 2000, 2015, 2030])
def test_extract_year_accepts_in_range_years(year):
    hit = extract_year(f"Some Movie {year} 720p", current_year=2026)
    assert isinstance(hit, Found)
    assert hit.value == year


@pytest.mark.parametrize("text", ["Some Movie 1900 720p", "Some Movie 2031 720p", "Some Movie 2099"])
def test_extract_year_rejects_out_of_range(text):
    assert extract_year(text, current_year=2026) is NOT_FOUND


def test_extract_year_defaults_to_today():
    next_year = datetime.date.today().year + 1
    assert extract_year(f"Future Movie {next_year}").value == next_year


def test_extract_year_at_start_of_name():
    assert extract_year("2012 1080p", current_year=2026) == Found(0, 2012)
    assert extract_year("1917 2019 1080p", current_year=2026) == Found(0, 1917)


def test_extract_year_needs_word_boundaries():
    assert extract_year("Movie x2024y 12024", current_year=2026) is NOT_FOUND


@pytest.mark.parametrize(
    "text",
    [
        "Show Season 02 Episode 05",
        "Show S02E05",
        "Show S02x05",
        "Show s02 e05",
        "Show Series 2 Ep 5",
        "Show S02 EP05",
    ],
)
def test_combined_season_episode(text):
    result = extract_season_episode(text)
    assert result.season == Found(5, 2)
    assert result.episode == Found(5, 5)


def test_cross_notation_season_episode():
    result = extract_season_episode("Game of Thrones 1x02 480p")
    assert result.season == Found(16, 1)
    assert result.episode == Found(16, 2)


def test_season_only():
    result = extract_season_episode("Stranger Things Season 4 720p")
    assert result.season == Found(16, 4)
    assert result.episode is NOT_FOUND
    assert result.offsets == (16,)


def test_episode_only():
    result = extract_season_episode("Money Heist Episode 7 Spanish")
    assert result.season is NOT_FOUND
    assert result.episode == Found(12, 7)


def test_no_season_episode_in_movie_name():
    result = extract_season_episode("Kung Fu Panda 4 2024 1080p WEB DL Hindi English 1 4GB")
    assert result.season is NOT_FOUND
    assert result.episode is NOT_FOUND
    assert result.offsets == ()


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Movie 2020 1080P", "1080p"),
        ("Movie 2020 4k HDR", "4K"),
        ("Movie 2020 2160p", "2160p"),
        ("Movie 480p 720p", "480p"),
    ],
)
def test_extract_quality(text, expected):
    assert extract_quality(text).value == expected


def test_extract_quality_missing():
    assert extract_quality("Movie 2020 HDRip") is NOT_FOUND


def test_languages_keep_first_seen_order():
    assert extract_languages("Movie eng hindi", DEFAULT_TABLES) == ("English", "Hindi")
    assert extract_languages("Movie Hindi English hindi", DEFAULT_TABLES) == ("Hindi", "English")


def test_eng_sub_is_not_an_audio_language():
    assert extract_languages("Movie 2024 eng sub hindi", DEFAULT_TABLES) == ("Hindi",)
    assert extract_languages("Movie 2024 ENG SUBS", DEFAULT_TABLES) == ()


def test_esubs_marker_skipped():
    assert extract_languages("Movie 2023 1080p ESubs Tamil Telugu", DEFAULT_TABLES) == ("Tamil", "Telugu")


def test_dual_audio_tag():
    assert extract_languages("Movie Dual Audio Hindi English", DEFAULT_TABLES) == (
        "Dual Audio",
        "Hindi",
        "English",
    )
