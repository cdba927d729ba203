"""
Query engine over loaded datasets.

Search is plain substring presence against each record's compact JSON
serialization, so a query can match any field value (or key), not only the
display fields. There is no tokenization and no ranking: hits come back in
dataset, category, record order.
"""

import logging
from typing import Iterable, List

import orjson

from ..datasets import CATEGORIES, DatasetRepository, DisplayFields, Record, SearchHit


def serialize_record(record: Record) -> str:
    """Serialize a record to compact JSON.

    Keys keep their insertion order and non-ASCII text is written literally,
    which makes the output stable for the same parsed document. Floats keep
    their fraction, so a source value of `1.0` is searched as `1.0`.
    """
    return orjson.dumps(record).decode("utf-8")


class QueryEngine:
    """Stateless search and export over a DatasetRepository.

    The engine never mutates the repository; every call reads the currently
    committed collection and a caller-supplied selection of owners.
    """

    def __init__(self, repository: DatasetRepository):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.repository = repository

    def search(self, query: str, selection: Iterable[str]) -> List[SearchHit]:
        """Return records of selected datasets whose JSON contains `query`.

        An empty query matches nothing.

        Args:
            query: Literal substring to look for
            selection: Owner identifiers taking part in the search

        Returns:
            Hits in dataset-then-category-then-record order
        """
        if not query:
            return []

        owners = set(selection)
        hits: List[SearchHit] = []
        for dataset in self.repository.datasets:
            if dataset.owner not in owners:
                continue
            for category, record in dataset.document.iter_records():
                if query in serialize_record(record):
                    hits.append(
                        SearchHit(owner=dataset.owner, category=category, record=record)
                    )

        self.logger.debug(
            f"Search '{query}' over {len(owners)} selected owners: {len(hits)} hits"
        )
        return hits

    def generate_script(self, selection: Iterable[str]) -> str:
        """Flatten the selected datasets into Markdown-like export text.

        For every selected owner (in selection order) that has a dataset, a
        `## <name>` heading is followed by one `- <label>: <detail>` line per
        record across players, events and glossary. Unknown owners are
        skipped.
        """
        lines: List[str] = []
        for owner in selection:
            dataset = self.repository.get_dataset(owner)
            if dataset is None:
                continue
            lines.append(f"## {self.repository.display_name(owner)}")
            for category in CATEGORIES:
                for record in dataset.document.records(category):
                    lines.append(DisplayFields.from_record(record).as_script_line())
        return "\n".join(lines)
