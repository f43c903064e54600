import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Body, HTTPException

from ..schemas import Archetype, ConnectionProfile, ScoreBreakdown, SyncProfileRequest
from ..services.sync_engine import (
    ARCHETYPE_LIBRARY,
    build_score_breakdown,
    generate_connection_profile,
    get_archetype_by_id,
    get_archetypes_for_theme,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/sync", tags=["sync"])

EXAMPLE_REQUEST = {
    "swiss_data": {
        "blocks": {
            "synastry_aspects": {
                "pairs": [
                    {"type": "trine", "a": "Moon", "b": "Venus", "orb": 1.2},
                    {"type": "conjunction", "a": "Sun", "b": "Mars", "orb": 0.8},
                    {"type": "square", "a": "Saturn", "b": "Mercury", "orb": 3.4},
                ]
            }
        },
        "person1": {"planets": {"Sun": {"sign": "Leo"}, "Moon": {"sign": "Cancer"}}},
        "person2": {"planets": {"Sun": {"sign": "Aries"}, "Moon": {"sign": "Pisces"}}},
    }
}


@router.post("/profile", response_model=ConnectionProfile)
def sync_profile(req: SyncProfileRequest = Body(..., examples=[EXAMPLE_REQUEST])) -> ConnectionProfile:
    return generate_connection_profile(req.swiss_data)


@router.post("/score", response_model=ScoreBreakdown)
def sync_score(req: SyncProfileRequest = Body(..., examples=[EXAMPLE_REQUEST])) -> ScoreBreakdown:
    profile = generate_connection_profile(req.swiss_data)
    if profile.features.total_aspects == 0:
        logger.info("sync_score_rejected_no_aspects")
        raise HTTPException(status_code=400, detail="NO_SYNASTRY_ASPECTS")
    return build_score_breakdown(profile)


@router.get("/archetypes", response_model=Dict[str, List[Archetype]])
def list_archetypes(theme: Optional[str] = None) -> Dict[str, List[Archetype]]:
    if theme is not None:
        return {theme: list(get_archetypes_for_theme(theme))}
    return {name: list(archetypes) for name, archetypes in ARCHETYPE_LIBRARY.items()}


@router.get("/archetypes/{archetype_id}", response_model=Archetype)
def get_archetype(archetype_id: str) -> Archetype:
    archetype = get_archetype_by_id(archetype_id)
    if archetype is None:
        raise HTTPException(status_code=404, detail="ARCHETYPE_NOT_FOUND")
    return archetype
