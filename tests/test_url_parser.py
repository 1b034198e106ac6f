import datetime

import pytest

from releasemeta.engine import ReleaseParser
from releasemeta.exceptions import EmptyTitleError, InvalidUrlError
from releasemeta.services import url_parser
from releasemeta.settings import settings


@pytest.fixture
def lookups(monkeypatch):
    calls = {"probe": [], "backfill": []}
    answers = {"size": None, "year": None}

    async def fake_probe(url):
        calls["probe"].append(url)
        return answers["size"]

    async def fake_backfill(title, media_type="movie"):
        calls["backfill"].append((title, media_type))
        return answers["year"]

    monkeypatch.setattr(url_parser.link_probe, "probe_link_size", fake_probe)
    monkeypatch.setattr(url_parser.tmdb, "backfill_year", fake_backfill)
    monkeypatch.setattr(settings, "probe_link_size", True)
    monkeypatch.setattr(settings, "testing", False)
    return calls, answers


@pytest.mark.asyncio
async def test_complete_name_needs_no_lookups(lookups):
    calls, _ = lookups
    url = "https://cdn.example.com/files/Kung.Fu.Panda.4.2024.1080p.WEB-DL.Hindi-English.1.4GB.mkv"
    result = await url_parser.parse_download_url(url)

    assert result.title == "Kung Fu Panda 4"
    assert result.year == 2024
    assert result.size == "1.4GB"
    assert calls == {"probe": [], "backfill": []}


@pytest.mark.asyncio
async def test_missing_size_and_year_are_backfilled(lookups):
    calls, answers = lookups
    answers.update(size="900MB", year=2021)
    url = "https://cdn.example.com/files/Dune.1080p.Hindi.mkv"
    result = await url_parser.parse_download_url(url)

    assert result.title == "Dune"
    assert result.size == "900MB"
    assert result.year == 2021
    assert calls["probe"] == [url]
    assert calls["backfill"] == [("Dune", "movie")]


@pytest.mark.asyncio
async def test_episode_backfill_searches_tv(lookups):
    calls, answers = lookups
    answers["year"] = 2005
    result = await url_parser.parse_download_url("https://cdn.example.com/The.Office.S02E05.720p.mkv")

    assert result.year == 2005
    assert calls["backfill"] == [("The Office", "tv")]


@pytest.mark.asyncio
async def test_implausible_backfilled_year_is_dropped(lookups):
    _, answers = lookups
    answers["year"] = datetime.date.today().year + 10
    result = await url_parser.parse_download_url("https://cdn.example.com/Dune.1080p.mkv")
    assert result.year is None


@pytest.mark.asyncio
async def test_probe_skipped_in_testing_mode(lookups, monkeypatch):
    calls, _ = lookups
    monkeypatch.setattr(settings, "testing", True)
    result = await url_parser.parse_download_url("https://cdn.example.com/Dune.2021.1080p.mkv")
    assert result.size is None
    assert calls["probe"] == []


@pytest.mark.asyncio
async def test_invalid_url(lookups):
    with pytest.raises(InvalidUrlError):
        await url_parser.parse_download_url("https://cdn.example.com/")


@pytest.mark.asyncio
async def test_channel_only_file_name(lookups):
    calls, _ = lookups
    with pytest.raises(EmptyTitleError):
        await url_parser.parse_download_url("https://cdn.example.com/@CineFlixHD.mkv")
    assert calls == {"probe": [], "backfill": []}


@pytest.mark.asyncio
async def test_backfilled_year_uses_pinned_current_year(lookups):
    _, answers = lookups
    answers["year"] = 2014
    pinned = ReleaseParser(current_year=2000)
    result = await url_parser.parse_download_url("https://cdn.example.com/Dune.1080p.mkv", parser=pinned)
    assert result.year is None

    answers["year"] = 2003
    result = await url_parser.parse_download_url("https://cdn.example.com/Dune.1080p.mkv", parser=pinned)
    assert result.year == 2003
