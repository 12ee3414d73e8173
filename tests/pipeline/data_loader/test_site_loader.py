"""Tests for the concurrent, all-or-nothing site data loader."""

import asyncio
import json
import logging

import pytest

from site_widgets.exceptions import DataLoadError
from site_widgets.pipeline.data_loader.loader import SiteDataLoader, load_site_context
from site_widgets.pipeline.data_loader.settings import DataSources


class DictClient:
    """Fetch client serving documents from a dict; missing sources fail."""

    def __init__(self, documents: dict):
        self.documents = documents
        self.fetched = []

    async def fetch_document(self, session, source):
        self.fetched.append(source)
        if source not in self.documents:
            raise DataLoadError(f"Could not read {source}", context={"source": source})
        return self.documents[source]


def sources() -> DataSources:
    return DataSources("cfg", "open", "content")


@pytest.mark.asyncio
async def test_load_site_context_from_directory(data_dir):
    context = await load_site_context(DataSources.from_base(data_dir))
    assert list(context.site_config.locations) == ["queenAnne", "capitolHill"]
    assert context.openings.last_updated == "Oct 1, 2026"
    assert context.content.steps[0].title == "Tour"
    assert context.key_map.storage_key("queenAnne") == "queenAnne"


@pytest.mark.asyncio
async def test_fetches_are_issued_concurrently(config_doc, openings_doc, content_doc):
    documents = {"cfg": config_doc, "open": openings_doc, "content": content_doc}

    class GateClient:
        def __init__(self):
            self.started = []
            self.gate = asyncio.Event()

        async def fetch_document(self, session, source):
            self.started.append(source)
            if len(self.started) == 3:
                self.gate.set()
            await self.gate.wait()
            return documents[source]

    client = GateClient()
    context = await asyncio.wait_for(
        load_site_context(sources(), session=object(), client=client), timeout=2
    )
    assert sorted(client.started) == ["cfg", "content", "open"]
    assert context.openings.last_updated == "Oct 1, 2026"


@pytest.mark.asyncio
async def test_any_fetch_failure_fails_whole_load(config_doc, content_doc):
    client = DictClient({"cfg": config_doc, "content": content_doc})
    with pytest.raises(DataLoadError):
        await load_site_context(sources(), session=object(), client=client)
    # All three were attempted before the join failed.
    assert sorted(client.fetched) == ["cfg", "content", "open"]


@pytest.mark.asyncio
async def test_validation_failure_becomes_load_error(openings_doc, content_doc):
    client = DictClient({"cfg": ["not", "an", "object"], "open": openings_doc, "content": content_doc})
    with pytest.raises(DataLoadError) as info:
        await load_site_context(sources(), session=object(), client=client)
    assert info.value.transient is False


@pytest.mark.asyncio
async def test_unexpected_error_is_wrapped(config_doc, openings_doc):
    class BrokenClient(DictClient):
        async def fetch_document(self, session, source):
            if source == "content":
                raise RuntimeError("boom")
            return await super().fetch_document(session, source)

    client = BrokenClient({"cfg": config_doc, "open": openings_doc})
    with pytest.raises(DataLoadError) as info:
        await load_site_context(sources(), session=object(), client=client)
    assert isinstance(info.value.__cause__, RuntimeError)


@pytest.mark.asyncio
async def test_loader_commits_on_success(config_doc, openings_doc, content_doc):
    loader = SiteDataLoader(
        sources(), client=DictClient({"cfg": config_doc, "open": openings_doc, "content": content_doc})
    )
    assert loader.ready is False
    assert await loader.load(session=object()) is True
    assert loader.ready is True
    assert loader.context.site_config.programs["infant"].name == "Infant"


@pytest.mark.asyncio
async def test_loader_keeps_previous_context_on_failure(
    config_doc, openings_doc, content_doc, caplog
):
    documents = {"cfg": config_doc, "open": openings_doc, "content": content_doc}
    client = DictClient(documents)
    loader = SiteDataLoader(sources(), client=client)
    assert await loader.load(session=object()) is True
    previous = loader.context

    del documents["open"]
    with caplog.at_level(logging.ERROR):
        assert await loader.load(session=object()) is False
    assert loader.context is previous
    assert "Error loading site data" in caplog.text
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].app_error["error_code"] == "DATA_LOAD_ERROR"
    assert errors[0].app_error["context"] == {"source": "open"}


@pytest.mark.asyncio
async def test_loader_failure_without_previous_context(tmp_path):
    (tmp_path / "site-config.json").write_text(json.dumps({}), encoding="utf-8")
    loader = SiteDataLoader(DataSources.from_base(tmp_path))
    assert await loader.load() is False
    assert loader.context is None
    assert loader.ready is False
