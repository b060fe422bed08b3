"""Tests for session prefetching and action outcomes."""

import asyncio
from datetime import date

import pytest

from record_sourcer.ancestry import IMAGE_URL_ERROR, SHARING_TEMPLATE_ERROR, SHARING_URL_ERROR
from record_sourcer.config import Settings
from record_sourcer.session import (
    DATA_CACHE,
    SHARING_DATA,
    OutcomeLevel,
    PopupSession,
    PrefetchCache,
    run_action,
)

FAST = Settings(prefetch_max_attempts=3, prefetch_delay=0.01)
RUN_DATE = date(2024, 3, 5)

IMAGE_ED = {
    "pageType": "image",
    "imageUrl": "https://www.ancestry.com/imageviewer/collections/60527/images/xyz?pId=2221897",
}

SHARING = {
    "v2": {
        "share_id": "abc",
        "share_token": "xyz",
        "share_url": "https://www.ancestry.com/sharing/abc?token=xyz",
    }
}


def returning(value):
    async def fetch():
        return value

    return fetch


async def never():
    await asyncio.Event().wait()


async def failing():
    raise ConnectionError("offline")


class TestPrefetchCache:
    def test_set_once(self):
        cache = PrefetchCache()
        cache.set("k", 1)
        assert "k" in cache
        assert cache.get("k") == 1
        with pytest.raises(KeyError):
            cache.set("k", 2)

    def test_missing(self):
        assert PrefetchCache().get("k", "default") == "default"


class TestSharingActions:
    """Tests for actions that require prefetched sharing data."""

    @pytest.mark.asyncio
    async def test_sharing_template(self):
        session = PopupSession("ancestry", IMAGE_ED, fetchers={SHARING_DATA: returning(SHARING)}, settings=FAST)
        session.prefetch_all()

        outcome = await session.build_sharing_template()
        assert outcome.success
        assert outcome.value == "{{Ancestry Sharing|abc|xyz}}"

    @pytest.mark.asyncio
    async def test_sharing_url(self):
        session = PopupSession("ancestry", IMAGE_ED, fetchers={SHARING_DATA: returning(SHARING)}, settings=FAST)
        session.prefetch_all()

        outcome = await session.build_sharing_url()
        assert outcome.value == "https://www.ancestry.com/sharing/abc?token=xyz"

    @pytest.mark.asyncio
    async def test_prefetch_reuses_task(self):
        session = PopupSession("ancestry", IMAGE_ED, fetchers={SHARING_DATA: returning(SHARING)}, settings=FAST)
        assert session.prefetch(SHARING_DATA) is session.prefetch(SHARING_DATA)
        assert session.prefetch(DATA_CACHE) is None
        await session.prefetch(SHARING_DATA)

    @pytest.mark.asyncio
    async def test_sharing_data_never_arrives(self):
        session = PopupSession("ancestry", IMAGE_ED, fetchers={SHARING_DATA: never}, settings=FAST)
        session.prefetch_all()
        try:
            outcome = await session.build_sharing_template()
        finally:
            session.prefetch(SHARING_DATA).cancel()

        assert not outcome.success
        assert outcome.level == OutcomeLevel.WARNING
        assert outcome.message == "Could not retrieve the Ancestry sharing data after 3 attempts"

    @pytest.mark.asyncio
    async def test_sharing_fetch_failed(self):
        """Test that a failed fetch is reported without waiting out every attempt."""
        session = PopupSession("ancestry", IMAGE_ED, fetchers={SHARING_DATA: failing}, settings=FAST)
        session.prefetch_all()

        outcome = await session.build_sharing_template()
        assert not outcome.success
        assert outcome.message == "Could not retrieve the Ancestry sharing data"

    @pytest.mark.asyncio
    async def test_sharing_data_without_ids(self):
        session = PopupSession("ancestry", IMAGE_ED, fetchers={SHARING_DATA: returning({})}, settings=FAST)
        session.prefetch_all()

        template = await session.build_sharing_template()
        url = await session.build_sharing_url()
        assert template.message == SHARING_TEMPLATE_ERROR
        assert url.message == SHARING_URL_ERROR

    @pytest.mark.asyncio
    async def test_record_without_image_not_prefetched(self):
        ed = {"pageType": "record"}
        session = PopupSession("ancestry", ed, fetchers={SHARING_DATA: returning(SHARING)}, settings=FAST)
        session.prefetch_all()

        assert await session.wait_for(SHARING_DATA) is False
        assert not session.is_ready(SHARING_DATA)

    @pytest.mark.asyncio
    async def test_sharing_url_page(self):
        ed = {"pageType": "sharingUrl", "ancestryTemplate": "{{Ancestry Sharing|1|2}}"}
        session = PopupSession("ancestry", ed, settings=FAST)
        outcome = await session.build_sharing_template()
        assert outcome.value == "{{Ancestry Sharing|1|2}}"


class TestRecordUrlAction:
    """Tests for going from an image viewer page to its record page."""

    @pytest.mark.asyncio
    async def test_record_url(self):
        ed = {**IMAGE_ED, "url": IMAGE_ED["imageUrl"]}
        session = PopupSession("ancestry", ed, settings=FAST)
        outcome = await session.build_record_url()

        assert outcome.success
        assert outcome.value == "https://www.ancestry.com/discoveryui-content/view/2221897:60527"

    @pytest.mark.asyncio
    async def test_unexpected_url_warns(self):
        ed = {"pageType": "image", "url": "https://www.ancestry.com/search?name=smith"}
        session = PopupSession("ancestry", ed, settings=FAST)
        outcome = await session.build_record_url()

        assert not outcome.success
        assert outcome.level == OutcomeLevel.WARNING
        assert outcome.message == IMAGE_URL_ERROR

    @pytest.mark.asyncio
    async def test_missing_url_warns(self):
        session = PopupSession("ancestry", {"pageType": "image"}, settings=FAST)
        outcome = await session.build_record_url()
        assert outcome.message == IMAGE_URL_ERROR


class TestCitationActions:
    """Tests for citation and table actions run through a session."""

    @pytest.mark.asyncio
    async def test_build_citation(self, freebmd_birth_ed):
        session = PopupSession("freebmd", freebmd_birth_ed, settings=FAST, run_date=RUN_DATE)
        outcome = await session.build_citation("inline")

        assert outcome.success
        assert outcome.value.startswith("<ref>\n'''Birth Registration''':\n")
        assert "(accessed 5 March 2024)" in outcome.value

    @pytest.mark.asyncio
    async def test_optional_data_times_out(self, freebmd_birth_ed):
        """Test that a citation is still built when the data cache never arrives."""
        session = PopupSession(
            "freebmd", freebmd_birth_ed, fetchers={DATA_CACHE: never}, settings=FAST, run_date=RUN_DATE
        )
        session.prefetch_all()
        try:
            outcome = await session.build_citation("source")
        finally:
            session.prefetch(DATA_CACHE).cancel()

        assert outcome.success
        assert outcome.value.startswith("* '''Birth Registration''': ")

    @pytest.mark.asyncio
    async def test_generalized_once(self, freebmd_birth_ed):
        session = PopupSession("freebmd", freebmd_birth_ed, settings=FAST, run_date=RUN_DATE)
        assert session.generalize() is session.generalize()

    @pytest.mark.asyncio
    async def test_invalid_data_warns(self):
        session = PopupSession("freebmd", {}, settings=FAST, run_date=RUN_DATE)
        outcome = await session.build_citation("inline")

        assert not outcome.success
        assert outcome.level == OutcomeLevel.WARNING
        assert "Could not interpret" in outcome.message

    @pytest.mark.asyncio
    async def test_household_table_with_citation_caption(self, myheritage_census_ed):
        session = PopupSession(
            "myheritage",
            myheritage_census_ed,
            options={"table_general_autoGenerate": "citationInTableCaption"},
            settings=FAST,
            run_date=RUN_DATE,
        )
        outcome = await session.build_household_table()
        assert outcome.value.startswith('{| border="1" cellpadding="4"\n|+ Household Members in 1881<ref>\n')


class TestRunAction:
    @pytest.mark.asyncio
    async def test_unexpected_error(self):
        async def broken():
            raise RuntimeError("boom")

        outcome = await run_action("X", broken)
        assert not outcome.success
        assert outcome.message == "X failed because of an unexpected error."

    @pytest.mark.asyncio
    async def test_success(self):
        outcome = await run_action("X", returning(42))
        assert outcome.success
        assert outcome.value == 42
        assert outcome.level == OutcomeLevel.INFO
