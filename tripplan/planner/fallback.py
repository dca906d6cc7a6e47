"""Popular-picks fallback when interest filtering leaves nothing."""

from __future__ import annotations

from collections.abc import Collection, Sequence
from typing import NamedTuple

from tripplan.domain.enums import Interest
from tripplan.domain.models import POI
from tripplan.planner.filtering import filter_by_interests


class CandidatePool(NamedTuple):
    pois: list[POI]
    used_fallback: bool


def popular_pool(pois: Sequence[POI]) -> list[POI]:
    # sorted() is stable, so equal ratings keep dataset order.
    return sorted(pois, key=lambda poi: poi.rating or 0.0, reverse=True)


def select_candidates(pois: Sequence[POI], interests: Collection[Interest]) -> CandidatePool:
    filtered = filter_by_interests(pois, interests)
    if filtered:
        return CandidatePool(filtered, False)
    return CandidatePool(popular_pool(pois), True)
