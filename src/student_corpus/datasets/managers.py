"""
Manager for the in-memory dataset collection.

Provides DatasetsManager, which holds the committed datasets, indexes them
by owner and keeps the identifier to display-name lookup.
"""

import logging
from typing import Dict, Iterable, List, Optional

from .models import Dataset, NameMap


class DatasetsManager:
    """Storage and lookup for loaded datasets.

    Maintains:
    - datasets: committed datasets in discovery order
    - datasets_by_owner: owner identifier -> dataset (owners are unique)
    - name_map: owner identifier -> display name
    """

    def __init__(self):
        self.datasets: List[Dataset] = []
        self.datasets_by_owner: Dict[str, Dataset] = {}
        self.name_map: NameMap = {}
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.logger.debug("DatasetsManager initialized")

    def replace_datasets(
        self, datasets: Iterable[Dataset], name_map: Optional[NameMap] = None
    ) -> None:
        """Replace the whole collection with `datasets`.

        When `name_map` is given it is committed together with the datasets.
        Datasets with an owner that was already seen are skipped with a
        warning so that owners stay unique.
        """
        committed: List[Dataset] = []
        by_owner: Dict[str, Dataset] = {}
        for dataset in datasets:
            if dataset.owner in by_owner:
                self.logger.warning(
                    f"Duplicate dataset owner '{dataset.owner}' ignored: {dataset.source_path}"
                )
                continue
            by_owner[dataset.owner] = dataset
            committed.append(dataset)

        self.datasets = committed
        self.datasets_by_owner = by_owner
        if name_map is not None:
            self.set_name_map(name_map)

    def set_name_map(self, name_map: NameMap) -> None:
        self.name_map = dict(name_map)

    def reset(self) -> None:
        """Drop all datasets and the name map."""
        self.datasets = []
        self.datasets_by_owner = {}
        self.name_map = {}

    def get_datasets(self) -> List[Dataset]:
        """Return a copy of the committed datasets list."""
        return self.datasets.copy()

    def get_owners(self) -> List[str]:
        """Return owners in collection order."""
        return [dataset.owner for dataset in self.datasets]

    def get_dataset(self, owner: str) -> Optional[Dataset]:
        return self.datasets_by_owner.get(owner)

    def display_name(self, owner: str) -> str:
        """Return the display name for `owner`, falling back to the raw ID."""
        return self.name_map.get(owner) or owner

    def has_display_name(self, owner: str) -> bool:
        return bool(self.name_map.get(owner))

    def __len__(self) -> int:
        return len(self.datasets)
