"""Rule-based tagging of semantic themes from a synastry feature set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Mapping, Sequence, Tuple

from ...schemas.sync import FeatureSet, Theme

BALANCED_THEME = "balanced"
FALLBACK_WEIGHT = 0.5


@dataclass(frozen=True)
class Condition:
    """One weighted trigger of a theme.

    ``signal`` is a ``str.format`` template filled from the feature fields.
    """

    weight: float
    test: Callable[[FeatureSet], bool]
    signal: str

    def describe(self, features: FeatureSet) -> str:
        return self.signal.format(**features.model_dump())


THEME_RULES: Tuple[Tuple[str, Sequence[Condition]], ...] = (
    (
        "emotional",
        (
            Condition(0.4, lambda f: f.moon_venus_links > 0, "{moon_venus_links} emotional planet link(s)"),
            Condition(0.3, lambda f: f.dominant_element == "water", "water element dominance"),
            Condition(
                0.2,
                lambda f: f.harmonious_aspects > f.challenging_aspects * 1.5,
                "harmonious flow",
            ),
        ),
    ),
    (
        "mental",
        (
            Condition(0.5, lambda f: f.mercury_links >= 2, "{mercury_links} mental connection(s)"),
            Condition(0.4, lambda f: f.dominant_element == "air", "air element dominance"),
        ),
    ),
    (
        "transformational",
        (
            Condition(0.5, lambda f: f.pluto_links > 0, "{pluto_links} Pluto connection(s)"),
            Condition(0.3, lambda f: f.has_saturn and f.challenging_aspects > 0, "Saturn lessons present"),
            Condition(
                0.2,
                lambda f: f.dominant_element == "water" and f.mars_links > 0,
                "emotional intensity",
            ),
        ),
    ),
    (
        "karmic",
        (
            Condition(0.4, lambda f: f.has_nodes, "nodal connections (past life)"),
            Condition(
                0.4,
                lambda f: f.has_saturn and f.saturn_links >= 2,
                "strong Saturn presence (karmic lessons)",
            ),
            Condition(0.3, lambda f: f.tight_conjunctions >= 2, "tight conjunctions (fated meeting)"),
        ),
    ),
    (
        "dynamic",
        (
            Condition(0.4, lambda f: f.mars_links >= 2, "{mars_links} Mars connection(s)"),
            Condition(0.4, lambda f: f.dominant_element == "fire", "fire element dominance"),
            Condition(0.2, lambda f: f.dominant_mode == "cardinal", "cardinal mode (initiating energy)"),
        ),
    ),
    (
        "growth",
        (
            Condition(0.5, lambda f: f.jupiter_links >= 2, "{jupiter_links} Jupiter expansion(s)"),
            Condition(
                0.3,
                lambda f: f.dominant_element == "fire" and f.harmonious_aspects > f.challenging_aspects,
                "optimistic fire energy",
            ),
        ),
    ),
    (
        "stable",
        (
            Condition(0.4, lambda f: f.dominant_element == "earth", "earth element dominance"),
            Condition(0.3, lambda f: f.dominant_mode == "fixed", "fixed mode (enduring connection)"),
            Condition(
                0.3,
                lambda f: f.has_saturn and f.harmonious_aspects > f.challenging_aspects,
                "Saturn provides structure",
            ),
        ),
    ),
)


def score_theme(name: str, conditions: Sequence[Condition], features: FeatureSet) -> Theme:
    weight = 0.0
    signals: List[str] = []
    for condition in conditions:
        if condition.test(features):
            weight += condition.weight
            signals.append(condition.describe(features))
    return Theme(name=name, weight=min(1.0, weight), signals=signals)


def detect_themes(features: FeatureSet) -> List[Theme]:
    """Return every active theme, strongest first.

    The list is never empty: when no rule fires a single ``balanced`` theme
    of weight 0.5 stands in.
    """
    themes = [score_theme(name, conditions, features) for name, conditions in THEME_RULES]
    themes = [theme for theme in themes if theme.weight > 0]

    if not themes:
        themes.append(
            Theme(name=BALANCED_THEME, weight=FALLBACK_WEIGHT, signals=["diverse aspects present"])
        )

    return sorted(themes, key=lambda t: -t.weight)


def get_dominant_theme(themes: Sequence[Theme]) -> Theme:
    if not themes:
        return Theme(name=BALANCED_THEME, weight=FALLBACK_WEIGHT, signals=["no specific dominance"])
    return themes[0]


def theme_weights(themes: Sequence[Theme]) -> Mapping[str, float]:
    return {theme.name: theme.weight for theme in themes}
