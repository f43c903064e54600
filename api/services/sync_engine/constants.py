"""
Sync Engine Constants - Shared Data

Sign classification tables and aspect/planet groupings shared by the
feature extractor and the theme detector.
"""

from typing import Dict, Tuple, FrozenSet

HARMONIOUS_ASPECTS: FrozenSet[str] = frozenset({"trine", "sextile", "conjunction"})
CHALLENGING_ASPECTS: FrozenSet[str] = frozenset({"square", "opposition"})
NEUTRAL_ASPECTS: FrozenSet[str] = frozenset({"semisquare", "sesquiquadrate", "quincunx"})

# Enumeration order doubles as the tie-break order for dominance.
ELEMENTS: Tuple[str, ...] = ("fire", "earth", "air", "water")
MODES: Tuple[str, ...] = ("cardinal", "fixed", "mutable")

EMOTIONAL_PLANETS: FrozenSet[str] = frozenset({"Moon", "Venus", "Neptune"})
KEY_PLANETS: FrozenSet[str] = frozenset({"Sun", "Moon", "Venus", "Mars", "Mercury", "Ascendant"})

TIGHT_CONJUNCTION_ORB = 2.0
MAX_KEY_CONNECTIONS = 5

# Zodiac sign data
SIGN_DATA: Dict[str, Dict[str, str]] = {
    "Aries": {"element": "fire", "mode": "cardinal"},
    "Taurus": {"element": "earth", "mode": "fixed"},
    "Gemini": {"element": "air", "mode": "mutable"},
    "Cancer": {"element": "water", "mode": "cardinal"},
    "Leo": {"element": "fire", "mode": "fixed"},
    "Virgo": {"element": "earth", "mode": "mutable"},
    "Libra": {"element": "air", "mode": "cardinal"},
    "Scorpio": {"element": "water", "mode": "fixed"},
    "Sagittarius": {"element": "fire", "mode": "mutable"},
    "Capricorn": {"element": "earth", "mode": "cardinal"},
    "Aquarius": {"element": "air", "mode": "fixed"},
    "Pisces": {"element": "water", "mode": "mutable"},
}

SIGN_ELEMENTS: Dict[str, str] = {sign: data["element"] for sign, data in SIGN_DATA.items()}
SIGN_MODES: Dict[str, str] = {sign: data["mode"] for sign, data in SIGN_DATA.items()}

THEME_NAMES: Tuple[str, ...] = (
    "emotional",
    "mental",
    "transformational",
    "karmic",
    "dynamic",
    "growth",
    "stable",
    "balanced",
)
