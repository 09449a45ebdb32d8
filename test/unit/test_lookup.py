"""
Unit tests for the lookup service: corpus loading, filtering and error mapping.
"""
import logging

import httpx
import pytest
from backend.app.models.schemas import CrateLookupRequest, SvelteLookupRequest, TopicLookupRequest
from backend.app.services.lookup import DocsLookup
from backend.app.services.remote_docs import RemoteDocsFetcher


@pytest.mark.unit
class TestLocalLookups:
    """Test cases for Tauri and Svelte lookups."""

    @pytest.mark.asyncio
    async def test_tauri_topic(self, lookup):
        result = await lookup.lookup_tauri(TopicLookupRequest(topic="commands"))

        assert not result.is_error
        assert result.text.startswith("# Commands\n")

    @pytest.mark.asyncio
    async def test_tauri_overview(self, lookup, tauri_corpus):
        result = await lookup.lookup_tauri(TopicLookupRequest())
        assert result.text == tauri_corpus

    @pytest.mark.asyncio
    async def test_svelte_partitions(self, lookup):
        svelte = await lookup.lookup_svelte(SvelteLookupRequest(topic="overview"))
        kit = await lookup.lookup_svelte(SvelteLookupRequest(topic="overview", type="sveltekit"))

        assert "Runes" in svelte.text and "Routing" not in svelte.text
        assert kit.text.startswith("# Start of SvelteKit documentation")

    @pytest.mark.asyncio
    async def test_missing_file_is_error_flagged(self, missing_settings, caplog):
        lookup = DocsLookup(missing_settings, logger=logging.getLogger("dev-docs-test"))

        with caplog.at_level(logging.ERROR, logger="dev-docs-test"):
            result = await lookup.lookup_tauri(TopicLookupRequest(topic="commands"))

        assert result.is_error
        assert result.error_kind == "read_error"
        assert result.text.startswith("Error: Could not fetch Tauri documentation. ")
        assert "Error fetching Tauri documentation" in caplog.text

    @pytest.mark.asyncio
    async def test_missing_svelte_file_names_type(self, missing_settings):
        lookup = DocsLookup(missing_settings)
        result = await lookup.lookup_svelte(SvelteLookupRequest(type="sveltekit"))

        assert result.is_error
        assert result.text.startswith("Error: Could not fetch sveltekit documentation. ")

    @pytest.mark.asyncio
    async def test_lookup_survives_failure(self, test_settings, docs_dir):
        lookup = DocsLookup(test_settings)
        (docs_dir / "TAURIllms.txt").unlink()

        failed = await lookup.lookup_tauri(TopicLookupRequest())
        ok = await lookup.lookup_svelte(SvelteLookupRequest())

        assert failed.is_error
        assert not ok.is_error


@pytest.mark.unit
class TestCrateLookup:
    """Test cases for docs.rs lookups."""

    @pytest.mark.asyncio
    async def test_crate_lookup(self, test_settings):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<h1>Crate serde</h1>"))
        lookup = DocsLookup(test_settings, fetcher=RemoteDocsFetcher(test_settings, transport=transport))

        result = await lookup.lookup_crate(CrateLookupRequest(crate_name="serde"))

        assert not result.is_error
        assert result.text == "Crate serde"

    @pytest.mark.asyncio
    async def test_crate_fetch_failure(self, test_settings):
        transport = httpx.MockTransport(lambda request: httpx.Response(500, text="boom"))
        lookup = DocsLookup(test_settings, fetcher=RemoteDocsFetcher(test_settings, transport=transport))

        result = await lookup.lookup_crate(CrateLookupRequest())

        assert result.is_error
        assert result.error_kind == "fetch_error"
        assert result.text.startswith("Error: Could not fetch documentation. ")
