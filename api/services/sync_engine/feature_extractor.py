"""Reduce raw synastry data into a flat feature set without interpreting it."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ...schemas.sync import AspectData, FeatureSet
from .constants import (
    CHALLENGING_ASPECTS,
    ELEMENTS,
    EMOTIONAL_PLANETS,
    HARMONIOUS_ASPECTS,
    KEY_PLANETS,
    MAX_KEY_CONNECTIONS,
    MODES,
    NEUTRAL_ASPECTS,
    SIGN_ELEMENTS,
    SIGN_MODES,
    TIGHT_CONJUNCTION_ORB,
)

logger = logging.getLogger(__name__)


def _dig(data: Any, *path: str) -> Any:
    cur = data
    for key in path:
        if not isinstance(cur, Mapping):
            return None
        cur = cur.get(key)
    return cur


def aspect_pairs(swiss_data: Mapping[str, Any] | None) -> List[Any]:
    """Return the raw aspect list, preferring the ``blocks`` nesting."""
    for path in (("blocks", "synastry_aspects", "pairs"), ("synastry_aspects", "pairs")):
        pairs = _dig(swiss_data, *path)
        if pairs is None:
            continue
        if isinstance(pairs, Sequence) and not isinstance(pairs, (str, bytes)):
            return list(pairs)
        break
    return []


def _valid_aspect(aspect: Any) -> Optional[AspectData]:
    if not isinstance(aspect, Mapping):
        return None
    kind, a, b = aspect.get("type"), aspect.get("a"), aspect.get("b")
    if not (isinstance(kind, str) and kind and isinstance(a, str) and a and isinstance(b, str) and b):
        return None
    orb = aspect.get("orb")
    if isinstance(orb, bool) or not isinstance(orb, (int, float)) or not math.isfinite(orb):
        orb = 0.0
    return AspectData(type=kind, a=a, b=b, orb=float(orb))


def _placements(swiss_data: Mapping[str, Any] | None) -> Iterable[Any]:
    for person in ("person1", "person2"):
        planets = _dig(swiss_data, person, "planets")
        if isinstance(planets, Mapping):
            yield from planets.values()
        elif isinstance(planets, Sequence) and not isinstance(planets, (str, bytes)):
            yield from planets


def _tally(swiss_data: Mapping[str, Any] | None, table: Mapping[str, str], categories: Sequence[str]) -> Dict[str, int]:
    counts = {category: 0 for category in categories}
    for placement in _placements(swiss_data):
        sign = placement.get("sign") if isinstance(placement, Mapping) else None
        category = table.get(sign) if isinstance(sign, str) else None
        if category:
            counts[category] += 1
    return counts


def _dominant(counts: Mapping[str, int], order: Sequence[str]) -> Optional[str]:
    # strict ">" keeps the first category in enumeration order on ties
    best, best_count = None, 0
    for category in order:
        if counts[category] > best_count:
            best, best_count = category, counts[category]
    return best


def element_dominance(swiss_data: Mapping[str, Any] | None) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(dominant_element, missing_element)`` across both charts."""
    counts = _tally(swiss_data, SIGN_ELEMENTS, ELEMENTS)
    dominant = _dominant(counts, ELEMENTS)

    missing, min_count = None, None
    for element in ELEMENTS:
        if min_count is None or counts[element] < min_count:
            missing, min_count = element, counts[element]
    if min_count:
        missing = None
    return dominant, missing


def mode_dominance(swiss_data: Mapping[str, Any] | None) -> Optional[str]:
    return _dominant(_tally(swiss_data, SIGN_MODES, MODES), MODES)


def extract_features(swiss_data: Mapping[str, Any] | None) -> FeatureSet:
    """Count aspect qualities, planet links and sign balance for a synastry.

    Entries missing ``type``, ``a`` or ``b`` are skipped and do not count
    toward any total. The input mapping is never modified.
    """
    counts = {
        "total_aspects": 0,
        "harmonious_aspects": 0,
        "challenging_aspects": 0,
        "neutral_aspects": 0,
        "moon_venus_links": 0,
        "mercury_links": 0,
        "mars_links": 0,
        "pluto_links": 0,
        "saturn_links": 0,
        "jupiter_links": 0,
        "node_links": 0,
        "tight_conjunctions": 0,
    }
    orbs: List[float] = []
    key_connections: List[str] = []

    for idx, raw in enumerate(aspect_pairs(swiss_data)):
        aspect = _valid_aspect(raw)
        if aspect is None:
            logger.debug("sync_aspect_skipped", extra={"index": idx})
            continue
        kind, a, b, orb = aspect.type, aspect.a, aspect.b, aspect.orb or 0.0
        aspect_type = kind.lower()
        pair = (a, b)
        counts["total_aspects"] += 1

        if aspect_type in HARMONIOUS_ASPECTS:
            counts["harmonious_aspects"] += 1
        elif aspect_type in CHALLENGING_ASPECTS:
            counts["challenging_aspects"] += 1
        elif aspect_type in NEUTRAL_ASPECTS:
            counts["neutral_aspects"] += 1

        if orb > 0:
            orbs.append(orb)
        if aspect_type == "conjunction" and orb < TIGHT_CONJUNCTION_ORB:
            counts["tight_conjunctions"] += 1

        if a in EMOTIONAL_PLANETS and b in EMOTIONAL_PLANETS:
            counts["moon_venus_links"] += 1
        if "Mercury" in pair:
            counts["mercury_links"] += 1
        if "Mars" in pair:
            counts["mars_links"] += 1
        if "Pluto" in pair:
            counts["pluto_links"] += 1
        if "Saturn" in pair:
            counts["saturn_links"] += 1
        if "Jupiter" in pair:
            counts["jupiter_links"] += 1
        if "Node" in a or "Node" in b:
            counts["node_links"] += 1

        if a in KEY_PLANETS or b in KEY_PLANETS:
            key_connections.append(f"{a} {kind} {b}")

    dominant_element, missing_element = element_dominance(swiss_data)

    return FeatureSet(
        **counts,
        dominant_element=dominant_element,
        dominant_mode=mode_dominance(swiss_data),
        missing_element=missing_element,
        average_orb=sum(orbs) / len(orbs) if orbs else 0.0,
        has_saturn=counts["saturn_links"] > 0,
        has_pluto=counts["pluto_links"] > 0,
        has_nodes=counts["node_links"] > 0,
        key_connections=key_connections[:MAX_KEY_CONNECTIONS],
    )
