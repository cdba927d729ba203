"""
Document loaders for student datasets.

Turns decoded text fetched from the content tree into typed documents,
using orjson for parsing. Parse problems raise DecodeError subclasses so
the repository can decide whether a failure is fatal or isolated.
"""

import logging
from typing import Any, List

import orjson

from ..errors import DatasetParseError, DecodeError
from .models import CATEGORIES, NameMap, Record, StructuredDocument


class DatasetDocumentLoader:
    """Parses name-map and dataset documents."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.logger.debug("DatasetDocumentLoader initialized")

    @staticmethod
    def parse_name_map(text: str) -> NameMap:
        """Parse a flat JSON object mapping identifiers to display names.

        Raises:
            DecodeError: If the text is not JSON or not a JSON object.
        """
        try:
            data = orjson.loads(text)
        except orjson.JSONDecodeError as e:
            raise DecodeError(f"Name map is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError(
                f"Name map must be a JSON object, got {type(data).__name__}"
            )

        # Drop null names so lookups fall back to the raw identifier
        return {str(key): str(value) for key, value in data.items() if value is not None}

    def parse_document(self, text: str, source_path: str) -> StructuredDocument:
        """Parse a dataset document.

        The document must be a JSON object. Each of `players`, `events` and
        `glossary` is optional; when present (and not null) it must be an
        array of objects. Any other top-level keys are ignored.

        Args:
            text: Decoded document text
            source_path: Path of the document in the content tree

        Returns:
            Parsed StructuredDocument

        Raises:
            DatasetParseError: If the document is malformed.
        """
        try:
            data = orjson.loads(text)
        except orjson.JSONDecodeError as e:
            raise DatasetParseError(source_path, f"not valid JSON ({e})") from e

        if not isinstance(data, dict):
            raise DatasetParseError(
                source_path, f"expected a JSON object, got {type(data).__name__}"
            )

        sections = {
            category: tuple(self._parse_section(data.get(category), category, source_path))
            for category in CATEGORIES
        }
        document = StructuredDocument(**sections)

        self.logger.debug(
            f"Parsed {source_path}: "
            + ", ".join(f"{c}={len(document.records(c))}" for c in CATEGORIES)
        )
        return document

    @staticmethod
    def _parse_section(value: Any, category: str, source_path: str) -> List[Record]:
        if value is None:
            return []
        if not isinstance(value, list):
            raise DatasetParseError(
                source_path, f"'{category}' must be an array, got {type(value).__name__}"
            )
        for index, item in enumerate(value):
            if not isinstance(item, dict):
                raise DatasetParseError(
                    source_path,
                    f"'{category}[{index}]' must be an object, got {type(item).__name__}",
                )
        return value
