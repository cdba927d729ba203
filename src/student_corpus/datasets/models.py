"""
Data models for student datasets.

Records stay plain dicts (they are free-form JSON objects written by many
contributors), while the containers around them are small frozen
dataclasses with clear type hints.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Literal, Optional, Tuple, TypeAlias

import orjson

# Type aliases for clarity
Record: TypeAlias = Dict[str, Any]
"""A single free-form record (player, event or glossary entry) as a dict."""

RecordCollection: TypeAlias = List[Record]
"""An ordered collection of records."""

NameMap: TypeAlias = Dict[str, str]
"""Maps student identifier to a human-readable display name."""

Category = Literal["players", "events", "glossary"]

# Fixed category order used by search and export
CATEGORIES: Tuple[Category, ...] = ("players", "events", "glossary")

# First present field wins
LABEL_FIELDS: Tuple[str, ...] = ("name_zh", "title", "term", "id")
DETAIL_FIELDS: Tuple[str, ...] = ("summary", "explain_zh")

# Dataset document file inside each student directory
DATASET_FILENAME = "index.json"

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z0-9]{9,10}")


def is_identifier(name: str) -> bool:
    """Return True if `name` is a 9-10 character ASCII alphanumeric student ID."""
    return IDENTIFIER_PATTERN.fullmatch(name) is not None


def _render_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, dict)):
        return orjson.dumps(value).decode("utf-8")
    return str(value)


def _is_blank(value: Any) -> bool:
    # null, "", false, 0 and NaN are all treated as absent
    if value is None:
        return True
    if isinstance(value, (str, bool, int, float)):
        return not value or value != value
    return False


def _first_present(record: Record, fields: Tuple[str, ...]) -> str:
    for field in fields:
        value = record.get(field)
        if _is_blank(value):
            continue
        return _render_scalar(value)
    return ""


@dataclass(frozen=True)
class DisplayFields:
    """Display view over a record.

    `label` is the first present of name_zh, title, term, id and `detail`
    the first present of summary, explain_zh. Missing, null, empty, false,
    zero and NaN values are skipped; both fall back to an empty string.

    Non-string values render the way a browser prints them: booleans as
    `true`/`false`, integral floats without a fraction (`1.0` -> `1`).
    Arrays and objects render as compact JSON.
    """

    label: str
    detail: str

    @classmethod
    def from_record(cls, record: Record) -> "DisplayFields":
        return cls(
            label=_first_present(record, LABEL_FIELDS),
            detail=_first_present(record, DETAIL_FIELDS),
        )

    def as_script_line(self) -> str:
        """Format as an export line: `- <label>: <detail>`."""
        return f"- {self.label}: {self.detail}"


@dataclass(frozen=True)
class StructuredDocument:
    """A student's dataset document: three ordered record sequences."""

    players: Tuple[Record, ...] = ()
    events: Tuple[Record, ...] = ()
    glossary: Tuple[Record, ...] = ()

    def records(self, category: Category) -> Tuple[Record, ...]:
        """Return the records of one category."""
        return getattr(self, category)

    def iter_records(self) -> Iterator[Tuple[Category, Record]]:
        """Yield (category, record) pairs in category-then-record order."""
        for category in CATEGORIES:
            for record in self.records(category):
                yield category, record

    @property
    def record_count(self) -> int:
        return sum(len(self.records(category)) for category in CATEGORIES)


@dataclass(frozen=True)
class Dataset:
    """One contributor's document together with its owner and source path."""

    owner: str
    source_path: str
    document: StructuredDocument


@dataclass(frozen=True)
class SearchHit:
    """A single matched record."""

    owner: str
    category: Category
    record: Record

    @property
    def display(self) -> DisplayFields:
        return DisplayFields.from_record(self.record)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading one dataset: either a Dataset or the failure reason."""

    identifier: str
    dataset: Optional[Dataset] = None
    error: Optional[Exception] = None

    def __post_init__(self) -> None:
        if (self.dataset is None) == (self.error is None):
            raise ValueError("LoadResult needs exactly one of dataset or error")

    @property
    def ok(self) -> bool:
        return self.dataset is not None

    @classmethod
    def success(cls, dataset: Dataset) -> "LoadResult":
        return cls(identifier=dataset.owner, dataset=dataset)

    @classmethod
    def failure(cls, identifier: str, error: Exception) -> "LoadResult":
        return cls(identifier=identifier, error=error)
