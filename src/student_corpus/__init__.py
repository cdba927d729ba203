"""
student_corpus: merged search over per-student baseball datasets

Loads each student's players/events/glossary document from a GitHub
repository, lets callers pick which contributors to include, searches the
merged records and exports them as a flat script.
"""

__version__ = "0.1.0"
__author__ = "student_corpus Contributors"

from .errors import CorpusError, TransportError, DecodeError, DatasetParseError
from .content import ContentFetcher, ContentEntry
from .datasets import (
    DatasetRepository,
    Dataset,
    DisplayFields,
    SearchHit,
    StructuredDocument,
    is_identifier,
)
from .search import QueryEngine, SelectionSet
from .app import CorpusSession, LoadStatus
from .utils.logging_config import setup_logging

__all__ = [
    # Session
    "CorpusSession",
    "LoadStatus",
    # Pipeline
    "ContentFetcher",
    "ContentEntry",
    "DatasetRepository",
    "QueryEngine",
    "SelectionSet",
    # Models
    "Dataset",
    "DisplayFields",
    "SearchHit",
    "StructuredDocument",
    "is_identifier",
    # Errors
    "CorpusError",
    "TransportError",
    "DecodeError",
    "DatasetParseError",
    # Logging
    "setup_logging",
]
