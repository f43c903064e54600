"""Map the dominant theme and score onto a named archetype."""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

from ...schemas.sync import Archetype, Theme

FALLBACK_THEME = "balanced"

# Score floors for the intense (index 0) and middle (index 1) archetype.
INTENSE_SCORE = 85
STRONG_SCORE = 70


def _a(archetype_id: str, name: str, description: str, tone: str, keywords: Sequence[str], color_scheme: str) -> Archetype:
    return Archetype(
        id=archetype_id,
        name=name,
        description=description,
        tone=tone,
        keywords=tuple(keywords),
        color_scheme=color_scheme,
    )


# Each entry is ordered most to least intense.
ARCHETYPE_LIBRARY: Dict[str, Tuple[Archetype, ...]] = {
    "emotional": (
        _a("the-mirror", "The Mirror", "Two souls reflecting each other's depths",
           "reflective, empathetic, deeply understanding",
           ("empathy", "reflection", "understanding", "depth"), "soft blue and silver gradient"),
        _a("the-ocean", "The Ocean", "Emotions flow together like tides",
           "fluid, nurturing, ever-changing",
           ("flow", "tides", "nurture", "depth"), "deep teal and aquamarine gradient"),
        _a("two-hearts", "Two Hearts, One Rhythm", "Hearts beating in perfect synchrony",
           "harmonious, tender, unified",
           ("harmony", "unity", "tenderness", "love"), "rose pink and lavender gradient"),
    ),
    "mental": (
        _a("the-thinkers", "The Thinkers", "Minds that dance in conversation",
           "intellectual, curious, stimulating",
           ("intellect", "conversation", "ideas", "curiosity"), "bright yellow and cyan gradient"),
        _a("the-inventors", "The Inventors", "Creating new worlds through shared vision",
           "innovative, visionary, collaborative",
           ("innovation", "vision", "creation", "future"), "electric blue and silver gradient"),
        _a("perfect-conversation", "A Perfect Conversation", "Words flow like music between you",
           "articulate, flowing, effortless",
           ("communication", "flow", "understanding", "expression"), "sky blue and white gradient"),
    ),
    "transformational": (
        _a("the-phoenix", "The Phoenix Pair", "Rising from ashes, transformed together",
           "intense, renewing, growth through contrast",
           ("rebirth", "transformation", "power", "depth"), "deep purple and magenta gradient"),
        _a("the-alchemists", "The Alchemists", "Turning pain into gold together",
           "transformative, powerful, healing",
           ("alchemy", "healing", "power", "transformation"), "gold and deep violet gradient"),
        _a("the-catalyst", "The Catalyst", "Each one changes the other forever",
           "intense, evolutionary, profound",
           ("change", "evolution", "intensity", "depth"), "crimson and indigo gradient"),
    ),
    "karmic": (
        _a("soul-contracts", "The Soul Contract", "Written in the stars before you met",
           "fated, meaningful, destined",
           ("destiny", "fate", "lessons", "purpose"), "midnight blue and gold gradient"),
        _a("the-teachers", "The Teachers", "Here to teach each other the hardest lessons",
           "challenging, meaningful, growth-oriented",
           ("lessons", "growth", "wisdom", "purpose"), "deep navy and silver gradient"),
        _a("ancient-souls", "Ancient Souls", "You've known each other across lifetimes",
           "timeless, familiar, profound",
           ("timeless", "recognition", "depth", "eternity"), "dark purple and moonlight silver gradient"),
    ),
    "dynamic": (
        _a("fire-meets-fire", "Fire Meets Fire", "Passion and energy create sparks",
           "passionate, energetic, exciting",
           ("passion", "energy", "spark", "action"), "orange and red gradient"),
        _a("the-warriors", "The Warriors", "Fighting for the same cause, side by side",
           "courageous, action-oriented, powerful",
           ("courage", "action", "strength", "partnership"), "ruby red and gold gradient"),
        _a("electric-connection", "Electric Connection", "Energy crackles between you",
           "electrifying, dynamic, alive",
           ("electricity", "energy", "alive", "dynamic"), "bright yellow and electric blue gradient"),
    ),
    "growth": (
        _a("infinite-potential", "Infinite Potential", "Together, anything is possible",
           "expansive, optimistic, limitless",
           ("expansion", "possibility", "growth", "adventure"), "bright gold and sky blue gradient"),
        _a("the-explorers", "The Explorers", "Discovering new worlds together",
           "adventurous, curious, expanding",
           ("adventure", "discovery", "exploration", "growth"), "sunrise orange and turquoise gradient"),
        _a("journey-together", "Journey Together", "The path unfolds as you walk it",
           "progressive, optimistic, evolving",
           ("journey", "progress", "growth", "partnership"), "warm yellow and green gradient"),
    ),
    "stable": (
        _a("the-foundation", "The Foundation", "Built to last through any storm",
           "stable, enduring, reliable",
           ("stability", "endurance", "trust", "foundation"), "forest green and brown gradient"),
        _a("earth-roots", "Earth Roots", "Grounded together in reality",
           "grounded, practical, secure",
           ("grounded", "practical", "roots", "security"), "earth brown and sage green gradient"),
        _a("unshakeable", "Unshakeable", "A connection that cannot be moved",
           "solid, dependable, lasting",
           ("solid", "dependable", "lasting", "trust"), "stone gray and forest green gradient"),
    ),
    "balanced": (
        _a("cosmic-counterparts", "Cosmic Counterparts", "Different but perfectly complementary",
           "balanced, harmonious, complementary",
           ("balance", "harmony", "complement", "wholeness"), "purple and gold gradient"),
        _a("natural-connection", "Natural Connection", "It just works, effortlessly",
           "natural, easy, comfortable",
           ("natural", "ease", "comfort", "flow"), "soft blue and warm beige gradient"),
        _a("yin-yang", "Yin & Yang", "Opposite energies creating perfect balance",
           "balanced, complementary, unified",
           ("balance", "opposites", "unity", "wholeness"), "black and white with purple accent gradient"),
    ),
}

_ARCHETYPES_BY_ID: Dict[str, Archetype] = {
    archetype.id: archetype
    for archetypes in ARCHETYPE_LIBRARY.values()
    for archetype in archetypes
}


def intensity_index(score: float) -> int:
    """0 for the most intense archetype, 2 for the most nuanced."""
    if score >= INTENSE_SCORE:
        return 0
    if score >= STRONG_SCORE:
        return 1
    return 2


def get_archetypes_for_theme(theme_name: str) -> Tuple[Archetype, ...]:
    return ARCHETYPE_LIBRARY.get(theme_name) or ARCHETYPE_LIBRARY[FALLBACK_THEME]


def get_archetype_by_id(archetype_id: str) -> Optional[Archetype]:
    return _ARCHETYPES_BY_ID.get(archetype_id)


def derive_archetype(themes: Sequence[Theme], score: float) -> Archetype:
    """Pick the archetype for the dominant (first) theme by score band.

    Unknown theme names and an empty theme list use the balanced entry.
    Shorter entries fall back toward index 0.
    """
    theme_name = themes[0].name if themes else FALLBACK_THEME
    archetypes = get_archetypes_for_theme(theme_name)
    idx = min(intensity_index(score), len(archetypes) - 1)
    return archetypes[idx]
