"""Per-menu session state: extracted data, options and prefetched data.

Optional data (a data cache, Ancestry sharing data) is fetched
speculatively as soon as a session starts. Actions that need it wait a
bounded time for it; optional data is skipped on timeout, and required
data turns the action into a warning.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Mapping
from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel
from tenacity import AsyncRetrying, retry_if_result, stop_after_attempt, wait_fixed

from record_sourcer import ancestry
from record_sourcer.citation import CitationInput, CitationType, build_citation
from record_sourcer.config import CONFIG, Options, Settings
from record_sourcer.exceptions import (
    InvalidExtractedDataError,
    RequiredDataUnavailableError,
    UnknownSiteError,
)
from record_sourcer.generalize import generalize_extracted_data
from record_sourcer.logging import get_logger
from record_sourcer.models.generalized import GeneralizedData
from record_sourcer.table.household import build_household_table, does_citation_want_household_table

logger = get_logger(__name__)

DATA_CACHE = "dataCache"
SHARING_DATA = "sharingData"

Fetcher = Callable[[], Awaitable[Any]]


class PrefetchCache:
    """Prefetched values, written at most once per key."""

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def set(self, key: str, value: Any) -> None:
        if key in self._values:
            raise KeyError(f"prefetched value for {key!r} is already set")
        self._values[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self._values


class OutcomeLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"


class ActionOutcome(BaseModel):
    """What a user-triggered action produced, or the warning to show instead."""

    success: bool
    value: Any = None
    message: str = ""
    level: OutcomeLevel = OutcomeLevel.INFO


async def run_action(name: str, action: Callable[[], Awaitable[Any]]) -> ActionOutcome:
    """Run ``action`` and turn any failure into a warning outcome."""
    try:
        value = await action()
    except (InvalidExtractedDataError, RequiredDataUnavailableError, UnknownSiteError) as e:
        return ActionOutcome(success=False, message=str(e), level=OutcomeLevel.WARNING)
    except Exception:
        logger.exception("action failed", action=name)
        return ActionOutcome(
            success=False,
            message=f"{name} failed because of an unexpected error.",
            level=OutcomeLevel.WARNING,
        )
    return ActionOutcome(success=True, value=value)


class PopupSession:
    """State for one menu session on one page."""

    def __init__(
        self,
        site: str,
        ed: Mapping[str, Any],
        options: Mapping[str, Any] | None = None,
        fetchers: Mapping[str, Fetcher] | None = None,
        settings: Settings = CONFIG,
        run_date: date | None = None,
    ) -> None:
        self.site = site
        self.ed = ed
        self.gd: GeneralizedData | None = None
        self.options = options if isinstance(options, Options) else Options(options)
        self.settings = settings
        self.run_date = run_date or date.today()
        self.cache = PrefetchCache()
        self._fetchers: dict[str, Fetcher] = dict(fetchers or {})
        self._tasks: dict[str, asyncio.Task[None]] = {}

    # Prefetch

    def prefetch(self, key: str) -> asyncio.Task[None] | None:
        """Start fetching ``key`` in the background; later calls reuse the task."""
        if key in self._tasks:
            return self._tasks[key]
        fetcher = self._fetchers.get(key)
        if fetcher is None:
            return None
        task = asyncio.ensure_future(self._run_prefetch(key, fetcher))
        self._tasks[key] = task
        return task

    def prefetch_all(self) -> None:
        for key in self._fetchers:
            if key == SHARING_DATA and not ancestry.needs_sharing_data(self.ed):
                continue
            self.prefetch(key)

    async def _run_prefetch(self, key: str, fetcher: Fetcher) -> None:
        value = None
        try:
            value = await fetcher()
        except Exception:
            logger.warning("prefetch failed", key=key, exc_info=True)
        self.cache.set(key, value)

    def is_ready(self, key: str) -> bool:
        return key in self.cache

    async def wait_for(self, key: str) -> bool:
        """Wait up to the configured attempts for ``key``; True if it arrived."""
        if self.is_ready(key):
            return True
        if key not in self._tasks:
            return False

        async def check() -> bool:
            return self.is_ready(key)

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.settings.prefetch_max_attempts),
            wait=wait_fixed(self.settings.prefetch_delay),
            retry=retry_if_result(lambda ready: not ready),
            retry_error_callback=lambda retry_state: False,
        )
        ready = await retrying(check)
        if not ready:
            logger.info("prefetch not ready", key=key, attempts=self.settings.prefetch_max_attempts)
        return ready

    async def get_optional(self, key: str) -> Any:
        if await self.wait_for(key):
            return self.cache.get(key)
        return None

    async def get_required(self, key: str, what: str) -> Any:
        ready = await self.wait_for(key)
        value = self.cache.get(key) if ready else None
        if value is None:
            attempts = self.settings.prefetch_max_attempts if key in self._tasks and not ready else 0
            raise RequiredDataUnavailableError(what=what, attempts=attempts)
        return value

    # Actions

    def generalize(self) -> GeneralizedData:
        if self.gd is None:
            self.gd = generalize_extracted_data(self.site, self.ed)
        return self.gd

    async def _build_citation(self, citation_type: CitationType) -> str:
        gd = self.generalize()
        await self.get_optional(DATA_CACHE)
        household_table = ""
        if does_citation_want_household_table(citation_type, gd, self.options):
            household_table = build_household_table(gd, self.options)
        result = build_citation(
            self.site,
            CitationInput(
                ed=self.ed,
                gd=gd,
                run_date=self.run_date,
                type=citation_type,
                options=self.options,
                household_table_string=household_table,
            ),
        )
        return result.citation

    async def build_citation(self, citation_type: CitationType | str) -> ActionOutcome:
        citation_type = CitationType(citation_type)
        return await run_action("Building citation", lambda: self._build_citation(citation_type))

    async def _build_household_table(self) -> str:
        gd = self.generalize()
        await self.get_optional(DATA_CACHE)
        citation = None
        if self.options["table_general_autoGenerate"] == "citationInTableCaption":
            citation = build_citation(
                self.site,
                CitationInput(ed=self.ed, gd=gd, run_date=self.run_date, options=self.options),
            )
        return build_household_table(gd, self.options, citation)

    async def build_household_table(self) -> ActionOutcome:
        return await run_action("Building household table", self._build_household_table)

    async def _sharing_value(self, build: Callable[..., str | None]) -> str | None:
        sharing_data = None
        if self.ed.get("pageType") != "sharingUrl":
            sharing_data = await self.get_required(SHARING_DATA, "Ancestry sharing data")
        return build(self.ed, sharing_data)

    async def _sharing_action(self, name: str, build: Callable[..., str | None], error: str) -> ActionOutcome:
        outcome = await run_action(name, lambda: self._sharing_value(build))
        if outcome.success and outcome.value is None:
            return ActionOutcome(success=False, message=error, level=OutcomeLevel.WARNING)
        return outcome

    async def build_sharing_template(self) -> ActionOutcome:
        return await self._sharing_action(
            "Building sharing template", ancestry.build_sharing_template, ancestry.SHARING_TEMPLATE_ERROR
        )

    async def build_sharing_url(self) -> ActionOutcome:
        return await self._sharing_action(
            "Building sharing URL", ancestry.build_sharing_url, ancestry.SHARING_URL_ERROR
        )

    async def build_record_url(self) -> ActionOutcome:
        """Record page URL for an Ancestry image viewer page."""

        async def build() -> str | None:
            return ancestry.build_record_url_from_image_url(self.ed.get("url") or "")

        outcome = await run_action("Building record URL", build)
        if outcome.success and outcome.value is None:
            return ActionOutcome(success=False, message=ancestry.IMAGE_URL_ERROR, level=OutcomeLevel.WARNING)
        return outcome
