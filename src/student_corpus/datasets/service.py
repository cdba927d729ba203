"""
Repository of student datasets.

Discovers student directories in the content tree, loads each student's
index.json and keeps the resulting collection together with the
identifier to display-name map.
"""

import logging
from typing import List, Optional, TYPE_CHECKING

from ..content import ContentFetcher
from ..errors import CorpusError
from .loaders import DatasetDocumentLoader
from .managers import DatasetsManager
from .models import DATASET_FILENAME, Dataset, LoadResult, NameMap, is_identifier

if TYPE_CHECKING:
    from ..settings import AppSettings

DEFAULT_STUDENTS_DIR = "data/students"
DEFAULT_NAME_MAP_PATH = "data/student_name_map.json"


class DatasetRepository:
    """Loads and holds the dataset collection.

    The collection is only replaced at the end of a successful `load_all()`
    pass; readers never observe a half-built collection.
    """

    def __init__(
        self,
        fetcher: ContentFetcher,
        students_dir: str = DEFAULT_STUDENTS_DIR,
        name_map_path: str = DEFAULT_NAME_MAP_PATH,
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.fetcher = fetcher
        self.students_dir = students_dir.strip("/")
        self.name_map_path = name_map_path

        self.loader = DatasetDocumentLoader()
        self.manager = DatasetsManager()

        # Identifiers skipped during the most recent load pass
        self.last_failures: List[str] = []

    @classmethod
    def from_settings(
        cls, fetcher: ContentFetcher, settings: "AppSettings"
    ) -> "DatasetRepository":
        source = settings.source
        return cls(
            fetcher,
            students_dir=source.students_dir,
            name_map_path=source.name_map_path,
        )

    def dataset_path(self, identifier: str) -> str:
        """Return the content path of a student's dataset document."""
        return f"{self.students_dir}/{identifier}/{DATASET_FILENAME}"

    async def fetch_name_map(self) -> NameMap:
        """Fetch the identifier to display-name map without committing it.

        Never raises: any failure is logged and an empty map is returned.
        """
        try:
            text = await self.fetcher.read_text(self.name_map_path)
            name_map = self.loader.parse_name_map(text)
        except CorpusError as e:
            self.logger.warning(f"Name map load failed ({self.name_map_path}): {e}")
            name_map = {}

        self.logger.debug(f"Name map has {len(name_map)} entries")
        return name_map

    async def load_name_map(self) -> NameMap:
        """Fetch the display-name map and make it the current one."""
        name_map = await self.fetch_name_map()
        self.manager.set_name_map(name_map)
        return name_map

    async def discover_identifiers(self) -> List[str]:
        """Return student identifiers found under the students directory.

        Only directory entries whose name is a valid identifier are kept,
        in listing order.

        Raises:
            TransportError: If the listing cannot be fetched.
            DecodeError: If the response is not a directory listing.
        """
        entries = await self.fetcher.list_directory(self.students_dir)
        identifiers = [
            entry.name for entry in entries if entry.is_dir and is_identifier(entry.name)
        ]
        self.logger.info(
            f"Found {len(identifiers)} student directories in '{self.students_dir}'"
        )
        skipped = len(entries) - len(identifiers)
        if skipped:
            self.logger.debug(f"Ignored {skipped} non-student entries")
        return identifiers

    async def load_dataset(self, identifier: str) -> Dataset:
        """Fetch and parse one student's dataset.

        Raises:
            TransportError: If the document cannot be fetched.
            DecodeError: If it cannot be decoded (DatasetParseError when it
                is not a valid dataset document).
        """
        path = self.dataset_path(identifier)
        text = await self.fetcher.read_text(path)
        document = self.loader.parse_document(text, path)
        return Dataset(owner=identifier, source_path=path, document=document)

    async def try_load_dataset(self, identifier: str) -> LoadResult:
        """Load one dataset, capturing data/transport failures in the result."""
        try:
            return LoadResult.success(await self.load_dataset(identifier))
        except CorpusError as e:
            return LoadResult.failure(identifier, e)

    async def load_all(self) -> List[Dataset]:
        """Load the name map and every discoverable dataset, one at a time.

        Individual dataset failures are logged and skipped. Failure to
        discover identifiers propagates and leaves the current collection
        and name map unchanged; both are committed together at the end.

        Returns:
            The newly committed dataset collection.
        """
        self.logger.info("Starting dataset loading...")

        name_map = await self.fetch_name_map()
        identifiers = await self.discover_identifiers()

        loaded: List[Dataset] = []
        failures: List[str] = []
        for identifier in identifiers:
            result = await self.try_load_dataset(identifier)
            if result.dataset is not None:
                loaded.append(result.dataset)
                self.logger.debug(
                    f"Loaded dataset '{identifier}' "
                    f"({result.dataset.document.record_count} records)"
                )
            else:
                failures.append(identifier)
                self.logger.warning(f"Dataset load failed: {identifier}: {result.error}")

        self.manager.replace_datasets(loaded, name_map)
        self.last_failures = failures

        self.logger.info(
            f"Dataset loading completed: {len(self.manager)} loaded, "
            f"{len(failures)} skipped"
        )
        return self.manager.get_datasets()

    def reset(self) -> None:
        """Forget all loaded state."""
        self.manager.reset()
        self.last_failures = []

    # Public API methods - delegate to manager

    @property
    def datasets(self) -> List[Dataset]:
        return self.manager.get_datasets()

    @property
    def owners(self) -> List[str]:
        return self.manager.get_owners()

    @property
    def name_map(self) -> NameMap:
        return dict(self.manager.name_map)

    def get_dataset(self, owner: str) -> Optional[Dataset]:
        return self.manager.get_dataset(owner)

    def display_name(self, owner: str) -> str:
        """Return the display name for `owner`, or the raw identifier."""
        return self.manager.display_name(owner)

    def __len__(self) -> int:
        return len(self.manager)
