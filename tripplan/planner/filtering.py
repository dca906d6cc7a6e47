"""Interest-based POI filtering."""

from __future__ import annotations

from collections.abc import Collection, Iterable

from tripplan.domain.enums import Interest
from tripplan.domain.models import POI


def matches_interests(poi: POI, interests: Collection[Interest]) -> bool:
    """`kids` is a hard child-friendly requirement; other tags match by category.

    With no category tags selected every POI surviving the kids check passes.
    """
    if Interest.KIDS in interests and not poi.kid_friendly:
        return False
    category_tags = [tag for tag in interests if tag is not Interest.KIDS]
    if not category_tags:
        return True
    if poi.category is None:
        return False
    return any(tag.value == poi.category.value for tag in category_tags)


def filter_by_interests(pois: Iterable[POI], interests: Collection[Interest]) -> list[POI]:
    selected = frozenset(interests)
    return [poi for poi in pois if matches_interests(poi, selected)]
