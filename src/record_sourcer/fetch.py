"""Single-attempt JSON fetches that report failure instead of raising."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from enum import Enum
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

from record_sourcer.config import CONFIG

logger = logging.getLogger(__name__)

FS_SOURCES_URL = "https://www.familysearch.org/service/tree/links/sources/"

FS_HEADERS = {
    "accept": "application/x-gedcomx-v1+json, application/json",
    "accept-language": "en",
}


class ErrorCondition(str, Enum):
    FETCH_ERROR = "FetchError"
    NOT_JSON = "NotJSON"
    FETCH_EXCEPTION = "FetchException"


class FetchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    status: int | None = None
    data_obj: Any = None
    error_condition: ErrorCondition | None = None


class FsSource(BaseModel):
    """One entry of a FamilySearch person's attached source list."""

    citation: str = ""
    title: str = ""
    uri: str = ""
    sort_key: str = ""
    sort_year: str = ""
    data_obj: dict[str, Any] | None = Field(default=None, description="Fetched GedcomX record, if any")

    @classmethod
    def from_json(cls, source: dict[str, Any]) -> FsSource:
        uri = source.get("uri") or ""
        if isinstance(uri, dict):
            uri = uri.get("uri") or ""
        event = source.get("event") or {}
        return cls(
            citation=source.get("citation") or "",
            title=source.get("title") or "",
            uri=uri,
            sort_key=str(event.get("sortKey") or ""),
            sort_year=str(event.get("sortYear") or ""),
        )


async def fetch_json(
    url: str,
    client: httpx.AsyncClient | None = None,
    headers: dict[str, str] | None = None,
) -> FetchResult:
    """GET ``url`` once and parse a JSON object body.

    Never raises: a non-200 status, a body that is not a JSON object, and
    transport errors are all reported in the result.
    """
    own_client = client is None
    if own_client:
        client = httpx.AsyncClient(timeout=CONFIG.http_timeout, follow_redirects=True)
    try:
        response = await client.get(url, headers=headers)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.warning("Fetch of %s failed: %s", url, e)
        return FetchResult(success=False, error_condition=ErrorCondition.FETCH_EXCEPTION)
    finally:
        if own_client:
            await client.aclose()

    if response.status_code != 200:
        logger.info("Fetch of %s returned status %s", url, response.status_code)
        return FetchResult(
            success=False,
            status=response.status_code,
            error_condition=ErrorCondition.FETCH_ERROR,
        )

    text = response.text
    if not text.startswith("{"):
        return FetchResult(success=False, status=200, error_condition=ErrorCondition.NOT_JSON)
    try:
        data_obj = json.loads(text)
    except ValueError:
        return FetchResult(success=False, status=200, error_condition=ErrorCondition.NOT_JSON)
    return FetchResult(success=True, status=200, data_obj=data_obj)


async def fetch_fs_sources_json(
    source_ids: Sequence[str] | None, client: httpx.AsyncClient | None = None
) -> FetchResult:
    """Fetch the attached source list for the given FamilySearch source ids."""
    if not source_ids:
        return FetchResult(success=False)
    url = FS_SOURCES_URL + "".join("," + source_id for source_id in source_ids)
    return await fetch_json(url, client=client, headers=FS_HEADERS)


def record_fetch_url(uri: str) -> str | None:
    """Return the fetchable URL for a source URI, or None if it is not a FamilySearch URI."""
    if "familysearch.org/" not in uri:
        return None
    return uri.replace("/familysearch.org", "/www.familysearch.org", 1)


async def fetch_records(
    sources: Sequence[FsSource], client: httpx.AsyncClient | None = None
) -> FetchResult:
    """Fetch the GedcomX record behind each source, in order.

    Sources without a FamilySearch URI are skipped. Fetched records are
    stored on ``source.data_obj``. Stops at the first failure and returns
    it; sources after that keep ``data_obj`` unset.
    """
    for source in sources:
        url = record_fetch_url(source.uri)
        if url is None:
            continue
        result = await fetch_json(url, client=client, headers=FS_HEADERS)
        if not result.success:
            return result
        source.data_obj = result.data_obj
    return FetchResult(success=True)
