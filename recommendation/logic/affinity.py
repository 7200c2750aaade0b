"""
Affinity Store

Schema-on-read parsing of per-career component affinity data and an index for
O(1) lookups during scoring. Stored affinity payloads are plain JSON whose shape
depends on the component key; anything that does not validate is dropped with
a warning rather than partially used.
"""

import logging
from typing import Any, Dict, Iterable, Optional, Tuple, Type, Union

from pydantic import ValidationError

from .constants import ComponentKey
from .contracts import CareerComponentAffinity, KolbAffinity, RiasecAffinity

logger = logging.getLogger(__name__)

AffinityModel = Union[RiasecAffinity, KolbAffinity]

AFFINITY_SHAPES: Dict[str, Type[AffinityModel]] = {
    ComponentKey.RIASEC.value: RiasecAffinity,
    ComponentKey.KOLB.value: KolbAffinity,
}


def parse_affinity_data(component_key: str, raw: Any) -> Optional[AffinityModel]:
    """
    Validate a raw affinity payload for a component.

    Accepts either the flat stored shape (``{"R": 40, "I": 90, ...}``) or the
    typed shape (``{"kind": "riasec", "scores": {...}}``).

    Returns:
        The typed affinity, or None when the component has no affinity shape or
        the payload is malformed.
    """
    shape = AFFINITY_SHAPES.get(component_key)
    if shape is None or not isinstance(raw, dict):
        return None

    if "scores" in raw:
        scores = raw["scores"]
    else:
        # flat rows may carry metadata such as rationale or top3
        scores = {key: value for key, value in raw.items() if not isinstance(value, (str, list, dict))}
    try:
        return shape(scores=scores)
    except ValidationError as e:
        logger.warning(f"Dropping malformed {component_key} affinity: {e.errors()[:1]}")
        return None


def build_affinity(
    career_id: str,
    component_id: str,
    component_key: str,
    raw: Any,
) -> Optional[CareerComponentAffinity]:
    data = parse_affinity_data(component_key, raw)
    if data is None:
        return None
    return CareerComponentAffinity(
        career_id=career_id,
        component_id=component_id,
        component_key=component_key,
        data=data,
    )


class AffinityIndex:
    """Read-only lookup of affinities by (career id, component key)."""

    def __init__(self, affinities: Iterable[CareerComponentAffinity] = ()):
        index: Dict[Tuple[str, str], CareerComponentAffinity] = {}
        for affinity in affinities:
            index[(affinity.career_id, affinity.component_key)] = affinity
        self._index = index

    def get(self, career_id: str, component_key: str) -> Optional[AffinityModel]:
        affinity = self._index.get((career_id, component_key))
        return affinity.data if affinity else None

    def __len__(self) -> int:
        return len(self._index)
