import httpx
import pytest
from unittest.mock import AsyncMock, patch

from releasemeta.services.link_probe import probe_link_size


@pytest.mark.asyncio
async def test_probe_formats_content_length():
    with patch("httpx.AsyncClient.head", new_callable=AsyncMock) as mock_head:
        mock_head.return_value = httpx.Response(200, headers={"content-length": "1503238553"})
        assert await probe_link_size("https://cdn.example.com/Movie.mkv") == "1.4GB"
        mock_head.assert_called_once_with("https://cdn.example.com/Movie.mkv")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(404),
        httpx.Response(200),
        httpx.Response(200, headers={"content-length": "abc"}),
        httpx.Response(200, headers={"content-length": "0"}),
    ],
)
async def test_probe_without_usable_length(response):
    with patch("httpx.AsyncClient.head", new_callable=AsyncMock) as mock_head:
        mock_head.return_value = response
        assert await probe_link_size("https://cdn.example.com/Movie.mkv") is None


@pytest.mark.asyncio
async def test_probe_network_error():
    with patch("httpx.AsyncClient.head", new_callable=AsyncMock) as mock_head:
        mock_head.side_effect = httpx.ReadTimeout("timed out")
        assert await probe_link_size("https://cdn.example.com/Movie.mkv") is None
