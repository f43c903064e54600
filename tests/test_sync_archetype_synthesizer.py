import pytest
from pydantic import ValidationError

from api.schemas.sync import Theme
from api.services.sync_engine.archetype_synthesizer import (
    ARCHETYPE_LIBRARY,
    derive_archetype,
    get_archetype_by_id,
    get_archetypes_for_theme,
)
from api.services.sync_engine.constants import THEME_NAMES


def test_library_covers_every_theme_with_three_archetypes():
    assert set(ARCHETYPE_LIBRARY) == set(THEME_NAMES)
    for archetypes in ARCHETYPE_LIBRARY.values():
        assert len(archetypes) == 3
    ids = [a.id for archetypes in ARCHETYPE_LIBRARY.values() for a in archetypes]
    assert len(ids) == len(set(ids)) == 24


def test_higher_scores_select_more_intense_archetypes():
    themes = [Theme(name="karmic", weight=1.0)]
    assert derive_archetype(themes, 60).id == "ancient-souls"
    assert derive_archetype(themes, 75).id == "the-teachers"
    assert derive_archetype(themes, 90).id == "soul-contracts"


@pytest.mark.parametrize(
    "score,expected",
    [(100, 0), (85, 0), (84, 1), (70, 1), (69, 2), (0, 2)],
)
def test_score_band_boundaries(score, expected):
    themes = [Theme(name="growth", weight=0.5)]
    assert derive_archetype(themes, score) == ARCHETYPE_LIBRARY["growth"][expected]


def test_unknown_theme_uses_balanced_entry():
    themes = [Theme(name="cosmic-chaos", weight=0.9)]
    assert derive_archetype(themes, 90).id == "cosmic-counterparts"
    assert get_archetypes_for_theme("cosmic-chaos") == ARCHETYPE_LIBRARY["balanced"]


def test_empty_themes_use_balanced_entry():
    assert derive_archetype([], 50).name == "Yin & Yang"
    assert derive_archetype([], 95).id == "cosmic-counterparts"


def test_only_first_theme_matters():
    themes = [Theme(name="stable", weight=0.7), Theme(name="dynamic", weight=0.7)]
    assert derive_archetype(themes, 72).id == "earth-roots"


def test_lookup_by_id():
    assert get_archetype_by_id("the-phoenix").name == "The Phoenix Pair"
    assert get_archetype_by_id("no-such-archetype") is None


def test_archetypes_are_frozen():
    archetype = get_archetype_by_id("the-mirror")
    with pytest.raises(ValidationError):
        archetype.name = "Something Else"
