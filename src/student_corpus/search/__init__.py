"""
Search and export over loaded student datasets.
"""

from .engine import QueryEngine, serialize_record
from .selection import SelectionSet
from .formatting import hit_label, provider_label, providers_note, results_summary

__all__ = [
    "QueryEngine",
    "serialize_record",
    "SelectionSet",
    "hit_label",
    "provider_label",
    "providers_note",
    "results_summary",
]
