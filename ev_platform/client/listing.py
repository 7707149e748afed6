# ev_platform/client/listing.py
"""
Derived view of the vehicle collection: text search, condition filter, sort.
Pure functions — the view is always recomputed from the full collection.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

ALL_CONDITIONS = "All"
NUMERIC_SORT_KEYS = ("price", "range_km")
STRING_SORT_KEYS = ("location",)
SORT_KEYS = NUMERIC_SORT_KEYS + STRING_SORT_KEYS


@dataclass(frozen=True)
class ListingCriteria:
    search: str = ""
    condition: str = ALL_CONDITIONS
    sort_key: Optional[str] = None    # price | range_km | location
    descending: bool = False

    def __post_init__(self):
        if self.sort_key is not None and self.sort_key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key '{self.sort_key}', expected one of {SORT_KEYS}")


def clear_filters() -> ListingCriteria:
    return ListingCriteria()


def matches_search(vehicle, search: str) -> bool:
    term = search.strip().lower()
    if not term:
        return True
    return term in vehicle.brand.lower() or term in vehicle.model.lower()


def _sort_value(vehicle, key: str):
    value = getattr(vehicle, key)
    if key in STRING_SORT_KEYS:
        return str(value or "")
    return float(value or 0)


def derive_view(vehicles: Sequence, criteria: ListingCriteria) -> list:
    view = [v for v in vehicles if matches_search(v, criteria.search)]
    if criteria.condition != ALL_CONDITIONS:
        view = [v for v in view if v.condition == criteria.condition]
    if criteria.sort_key:
        view.sort(key=lambda v: _sort_value(v, criteria.sort_key), reverse=criteria.descending)
    return view
