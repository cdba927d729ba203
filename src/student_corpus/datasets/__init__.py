"""
Module for working with student datasets.

Provides the repository that discovers and loads every student's
index.json from the content tree, plus the models, loader and manager it
is built from.
"""

from .service import DatasetRepository, DEFAULT_NAME_MAP_PATH, DEFAULT_STUDENTS_DIR
from .models import (
    CATEGORIES,
    DATASET_FILENAME,
    Category,
    Dataset,
    DisplayFields,
    LoadResult,
    NameMap,
    Record,
    RecordCollection,
    SearchHit,
    StructuredDocument,
    is_identifier,
)
from .managers import DatasetsManager
from .loaders import DatasetDocumentLoader

# Public exports
__all__ = [
    # Main repository
    "DatasetRepository",
    "DEFAULT_STUDENTS_DIR",
    "DEFAULT_NAME_MAP_PATH",
    # Models
    "Category",
    "Dataset",
    "DisplayFields",
    "LoadResult",
    "NameMap",
    "Record",
    "RecordCollection",
    "SearchHit",
    "StructuredDocument",
    "is_identifier",
    # Constants
    "CATEGORIES",
    "DATASET_FILENAME",
    # Component classes (for advanced usage)
    "DatasetsManager",
    "DatasetDocumentLoader",
]
