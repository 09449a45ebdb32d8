import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from backend.app.models.schemas import CrateLookupRequest, SvelteLookupRequest, TopicLookupRequest
from backend.app.services.corpus_loader import CorpusLoader, DocSet, default_doc_sets
from backend.app.services.exceptions import DocsError, FetchError, ReadError
from backend.app.services.relevance import RelevanceFilter
from backend.app.services.remote_docs import RemoteDocsFetcher
from shared.config import Settings


@dataclass
class LookupResult:
    text: str
    is_error: bool = False
    error_kind: Optional[str] = None  # "read_error" | "fetch_error"


def _error_result(what: str, err: DocsError) -> LookupResult:
    kind = "fetch_error" if isinstance(err, FetchError) else "read_error"
    return LookupResult(text=f"Error: Could not fetch {what}. {err}", is_error=True, error_kind=kind)


class DocsLookup:
    """
    Boundary between the front-ends and the retrieval code.

    Failures of the corpus loader and the remote fetcher are logged and turned
    into error-flagged results here, so a bad lookup never takes the server down.
    """

    def __init__(self, settings: Settings, logger: Optional[logging.Logger] = None,
                 loader: Optional[CorpusLoader] = None,
                 fetcher: Optional[RemoteDocsFetcher] = None):
        self.settings = settings
        self.logger = logger or logging.getLogger(__name__)
        self.loader = loader or CorpusLoader(default_doc_sets(settings), logger=self.logger)
        self.fetcher = fetcher or RemoteDocsFetcher(settings, logger=self.logger)

    def _filter_for(self, doc_set: DocSet) -> RelevanceFilter:
        return RelevanceFilter(
            source=f"in {doc_set.label} docs",
            scheme=doc_set.scheme,
            max_length=self.settings.max_excerpt_length,
        )

    async def _lookup_local(self, name: str, topic: str, partition: Optional[str] = None) -> str:
        doc_set = self.loader.doc_set(name)
        corpus = await asyncio.to_thread(self.loader.load, name)
        excerpt = self._filter_for(doc_set).select(corpus, partition, topic)
        self.logger.info(
            f"Selected {excerpt.match.value} from {name} docs: "
            f"chars={len(excerpt.text)} truncated={excerpt.truncated}"
        )
        return excerpt.text

    async def lookup_tauri(self, request: TopicLookupRequest) -> LookupResult:
        self.logger.info(f"Fetching Tauri documentation for topic: {request.topic}")
        try:
            text = await self._lookup_local("tauri", request.topic)
        except ReadError as e:
            self.logger.error(f"Error fetching Tauri documentation: {e}")
            return _error_result("Tauri documentation", e)
        self.logger.info(f"Successfully processed Tauri docs for topic: {request.topic}")
        return LookupResult(text=text)

    async def lookup_svelte(self, request: SvelteLookupRequest) -> LookupResult:
        self.logger.info(f"Fetching {request.type} documentation for topic: {request.topic}")
        try:
            text = await self._lookup_local("svelte", request.topic, request.type)
        except ReadError as e:
            self.logger.error(f"Error fetching {request.type} documentation: {e}")
            return _error_result(f"{request.type} documentation", e)
        self.logger.info(f"Successfully processed {request.type} docs for topic: {request.topic}")
        return LookupResult(text=text)

    async def lookup_crate(self, request: CrateLookupRequest) -> LookupResult:
        self.logger.info(f"Fetching documentation for crate: {request.crate_name}")
        try:
            excerpt = await self.fetcher.fetch_crate(request.crate_name)
        except FetchError as e:
            self.logger.error(f"Error fetching documentation: {e}")
            return _error_result("documentation", e)
        self.logger.info(f"Successfully processed docs for {request.crate_name}")
        return LookupResult(text=excerpt.text)
