"""Tests for contributor selection and display labels."""

from student_corpus.datasets import SearchHit
from student_corpus.search import (
    SelectionSet,
    hit_label,
    provider_label,
    providers_note,
    results_summary,
)

OWNERS = ["C44116146", "D55227257", "E66338368X"]


class TestSelectionSet:
    """Test selection operations."""

    def test_all_selected_by_default(self) -> None:
        selection = SelectionSet(OWNERS)
        assert list(selection) == OWNERS
        assert len(selection) == 3

    def test_initial_subset(self) -> None:
        selection = SelectionSet(OWNERS, selected=["E66338368X", "unknown"])
        assert list(selection) == ["E66338368X"]

    def test_iteration_follows_available_order(self) -> None:
        selection = SelectionSet(OWNERS, selected=[])
        selection.select("E66338368X")
        selection.select("C44116146")
        assert list(selection) == ["C44116146", "E66338368X"]

    def test_select_unknown(self) -> None:
        selection = SelectionSet(OWNERS, selected=[])
        assert selection.select("Z00000000") is False
        assert "Z00000000" not in selection

    def test_toggle(self) -> None:
        selection = SelectionSet(OWNERS)
        assert selection.toggle("D55227257") is False
        assert not selection.is_selected("D55227257")
        assert selection.toggle("D55227257") is True
        assert "D55227257" in selection

    def test_select_all_none_invert(self) -> None:
        selection = SelectionSet(OWNERS)
        selection.select_none()
        assert list(selection) == []
        selection.select("D55227257")
        selection.invert()
        assert list(selection) == ["C44116146", "E66338368X"]
        selection.select_all()
        assert list(selection) == OWNERS

    def test_deselect_missing_is_noop(self) -> None:
        selection = SelectionSet(OWNERS)
        selection.deselect("Z00000000")
        assert len(selection) == 3

    def test_duplicates_in_available(self) -> None:
        selection = SelectionSet(["C44116146", "C44116146"])
        assert selection.available == ["C44116146"]


class TestFormatting:
    """Test display labels."""

    def test_provider_label(self) -> None:
        name_map = {"C44116146": "王小明"}
        assert provider_label("C44116146", name_map) == "王小明（C44116146）"
        assert provider_label("D55227257", name_map) == "D55227257"

    def test_hit_label(self) -> None:
        hit = SearchHit(owner="C44116146", category="events", record={"id": "e1", "title": "雙殺"})
        assert hit_label(hit) == "[C44116146] events :: 雙殺"

    def test_summaries(self) -> None:
        assert results_summary(2) == "Found 2 results"
        assert providers_note(3) == "3 contributors"
