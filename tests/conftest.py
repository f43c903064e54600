"""Shared synastry fixtures."""

import pytest


@pytest.fixture
def intense_synastry():
    """Pluto-heavy synastry with a water-dominant placement mix."""
    return {
        "blocks": {
            "synastry_aspects": {
                "pairs": [
                    {"type": "conjunction", "a": "Pluto", "b": "Venus", "orb": 1.0},
                    {"type": "square", "a": "Pluto", "b": "Moon", "orb": 2.5},
                    {"type": "trine", "a": "Sun", "b": "Moon", "orb": 3.0},
                    {"type": "opposition", "a": "Saturn", "b": "Mars", "orb": 4.0},
                ]
            }
        },
        "person1": {"planets": {"Sun": {"sign": "Scorpio"}, "Moon": {"sign": "Cancer"}}},
        "person2": {"planets": {"Sun": {"sign": "Pisces"}, "Moon": {"sign": "Leo"}}},
    }
