"""
Session facade tying the content fetcher, dataset repository, query engine
and contributor selection together.

Usage:
    async with CorpusSession(settings) as session:
        status = await session.initialize()
        hits = session.run_search("全壘打")
        script = session.generate_script()
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import httpx

from .content import ContentFetcher
from .datasets import DatasetRepository, SearchHit
from .errors import CorpusError
from .search import QueryEngine, SelectionSet, provider_label
from .settings import AppSettings

STATUS_LOADED = "{count} datasets loaded"
STATUS_FAILED = "Failed to load datasets"


@dataclass(frozen=True)
class LoadStatus:
    """Outcome of a session initialization."""

    ok: bool
    dataset_count: int
    message: str
    failures: Tuple[str, ...] = ()


class CorpusSession:
    """Runtime state for browsing the merged student corpus.

    Owns the repository (the only long-lived data) and the transient
    selection of contributors used by search and export.
    """

    def __init__(
        self,
        settings: Optional[AppSettings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the session.

        Args:
            settings: Application settings; defaults to the stored profile,
                which is only read.
            client: Optional httpx client passed through to the fetcher.

        Raises:
            ConfigError: If the content source configuration is invalid.
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings if settings is not None else AppSettings()

        validation = self.settings.validate()
        for warning in validation.warnings:
            self.logger.warning(f"Configuration warning: {warning}")
        validation.raise_for_errors()

        self.fetcher = ContentFetcher.from_settings(self.settings, client=client)
        self.repository = DatasetRepository.from_settings(self.fetcher, self.settings)
        self.engine = QueryEngine(self.repository)
        self.selection = SelectionSet([])

    async def initialize(self) -> LoadStatus:
        """Load every dataset and select all loaded contributors.

        Per-dataset failures only reduce the count; a failure to discover
        datasets is reported as a failed status instead of raising.
        """
        source = self.settings.source
        self.logger.info(f"Loading datasets from {source.repository}@{source.branch}")
        try:
            datasets = await self.repository.load_all()
        except CorpusError:
            self.logger.exception("Dataset discovery failed")
            return LoadStatus(
                ok=False,
                dataset_count=len(self.repository),
                message=STATUS_FAILED,
            )

        self.selection = SelectionSet(self.repository.owners)
        message = STATUS_LOADED.format(count=len(datasets))
        self.logger.info(message)
        return LoadStatus(
            ok=True,
            dataset_count=len(datasets),
            message=message,
            failures=tuple(self.repository.last_failures),
        )

    def run_search(self, raw_query: str) -> List[SearchHit]:
        """Search the selected datasets; a blank query returns no hits."""
        query = raw_query.strip()
        if not query:
            return []
        return self.engine.search(query, self.selection)

    def generate_script(self) -> str:
        """Export the selected datasets as script text."""
        return self.engine.generate_script(self.selection)

    def provider_entries(self) -> List[Tuple[str, str]]:
        """Return (owner, label) pairs for every loaded contributor."""
        name_map = self.repository.name_map
        return [(owner, provider_label(owner, name_map)) for owner in self.repository.owners]

    async def aclose(self) -> None:
        await self.fetcher.aclose()

    async def __aenter__(self) -> "CorpusSession":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
