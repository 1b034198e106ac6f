from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from typing import List, Optional, Union

from releasemeta.constants import LABEL_SEPARATORS, no_cache_headers
from releasemeta.exceptions import EmptyTitleError, InvalidUrlError
from releasemeta.logger import logger
from releasemeta.services.download_labels import download_caption, download_label
from releasemeta.services.url_parser import parse_download_url

router = APIRouter(prefix="/utils")


class ParseUrlRequest(BaseModel):
    url: str


class ParseUrlResponse(BaseModel):
    movieName: str
    year: Optional[int] = None
    languages: List[str] = []
    quality: Optional[str] = None
    size: Optional[str] = None
    season: Optional[int] = None
    episode: Optional[int] = None


class DownloadLabelRequest(BaseModel):
    url: str
    label: Optional[str] = None
    title: Optional[str] = None
    year: Optional[Union[int, str]] = None
    separator: Optional[str] = None


@router.post('/parse-url', response_model=ParseUrlResponse)
async def parse_url(body: ParseUrlRequest):
    """Extract release metadata from the file name at the end of a URL.

    Args:
        body: JSON with the download ``url``

    Returns:
        JSONResponse with movieName, year, languages, quality, size, season, episode
    """
    if not body.url or not body.url.strip():
        raise HTTPException(status_code=400, detail="URL is required.")
    try:
        result = await parse_download_url(body.url)
    except InvalidUrlError as exc:
        logger.info(f"Rejected URL {body.url!r}: {exc.reason}")
        raise HTTPException(status_code=400, detail=str(exc))
    except EmptyTitleError as exc:
        logger.info(f"No title in {body.url!r}")
        raise HTTPException(status_code=422, detail=exc.message)
    return JSONResponse(content=result.to_response(), headers=no_cache_headers)


@router.post('/download-label')
async def get_download_label(body: DownloadLabelRequest):
    """Canonical caption for a stored download link (URL + admin label)."""
    if body.separator is not None and body.separator not in LABEL_SEPARATORS:
        raise HTTPException(status_code=400, detail=f"separator must be one of {list(LABEL_SEPARATORS)}")
    label = download_label(body.url, body.label, body.separator)
    caption = download_caption(body.url, body.label, body.title, body.year, body.separator)
    return JSONResponse(content={"label": label, "caption": caption}, headers=no_cache_headers)
