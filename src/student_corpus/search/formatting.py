"""Text labels for presenting contributors and search hits."""

from ..datasets import NameMap, SearchHit


def provider_label(owner: str, name_map: NameMap) -> str:
    """Return `name（id）` when a display name is known, otherwise the id."""
    name = name_map.get(owner)
    return f"{name}（{owner}）" if name else owner


def hit_label(hit: SearchHit) -> str:
    """Return a one-line description of a hit: `[owner] category :: label`."""
    return f"[{hit.owner}] {hit.category} :: {hit.display.label}"


def results_summary(count: int) -> str:
    return f"Found {count} results"


def providers_note(count: int) -> str:
    return f"{count} contributors"
