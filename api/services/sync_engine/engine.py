"""
Sync engine pipeline: synastry data in, connection profile out.

Stages run strictly in order (features -> themes -> archetype -> text) and
share nothing between calls except the read-only libraries.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from ...schemas.sync import ConnectionProfile, FeatureSet, ScoreBreakdown, ScoreDetails
from .archetype_synthesizer import derive_archetype
from .feature_extractor import extract_features
from .text_renderer import (
    generate_ai_insight,
    generate_keywords,
    generate_poetic_headline,
    generate_subheadline,
)
from .theme_detector import detect_themes, get_dominant_theme, theme_weights

logger = logging.getLogger(__name__)

ENGINE_VERSION = "sync-1.0.0"

BASE_SCORE = 50.0
HARMONIOUS_WEIGHT = 50.0
CHALLENGING_WEIGHT = 25.0
QUALITY_BONUS = 5.0
IMBALANCE_PENALTY = 10.0

# (score floor, percentile) pairs; below the last floor the percentile is linear.
RARITY_TABLE = (
    (95, 99),
    (90, 95),
    (85, 90),
    (80, 85),
    (75, 75),
    (70, 65),
    (60, 50),
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_raw_score(features: FeatureSet) -> float:
    """Unclamped score: base 50, aspect ratios, quality bonuses, imbalance penalty.

    A chart with no aspects divides by 1, so both ratios are 0 and the
    result stays at the base. The tight-orb bonus needs at least one
    counted aspect: an empty chart has no orbs to average.
    """
    total = features.total_aspects or 1
    harmonious_ratio = features.harmonious_aspects / total
    challenging_ratio = features.challenging_aspects / total

    score = BASE_SCORE
    score += harmonious_ratio * HARMONIOUS_WEIGHT
    score -= challenging_ratio * CHALLENGING_WEIGHT

    if features.moon_venus_links >= 2:
        score += QUALITY_BONUS
    if features.tight_conjunctions >= 2:
        score += QUALITY_BONUS
    if features.total_aspects > 0 and features.average_orb < 2:
        score += QUALITY_BONUS
    if len(features.key_connections) >= 3:
        score += QUALITY_BONUS

    if features.challenging_aspects > features.harmonious_aspects * 2:
        score -= IMBALANCE_PENALTY

    return score


def calculate_score(features: FeatureSet) -> int:
    return min(100, max(0, _round_half_up(calculate_raw_score(features))))


def calculate_rarity(score: int) -> int:
    """Approximate share of connections this score beats, 0..99."""
    for floor, percentile in RARITY_TABLE:
        if score >= floor:
            return percentile
    return max(0, _round_half_up(score / 60 * 50))


def generate_connection_profile(swiss_data: Optional[Mapping[str, Any]]) -> ConnectionProfile:
    features = extract_features(swiss_data)

    themes = detect_themes(features)
    dominant_theme = get_dominant_theme(themes)

    score = calculate_score(features)

    archetype = derive_archetype(themes, score)

    profile = ConnectionProfile(
        score=score,
        features=features,
        themes=themes,
        dominant_theme=dominant_theme,
        archetype=archetype,
        headline=generate_poetic_headline(archetype, score),
        subheadline=generate_subheadline(archetype, dominant_theme),
        insight=generate_ai_insight(archetype, dominant_theme, features, score),
        keywords=generate_keywords(archetype, themes),
        color_scheme=archetype.color_scheme,
    )
    logger.info(
        "sync_profile_generated",
        extra={
            "score": score,
            "archetype": archetype.id,
            "themes": theme_weights(themes),
            "total_aspects": features.total_aspects,
        },
    )
    return profile


def build_score_breakdown(
    profile: ConnectionProfile, calculated_at: Optional[datetime] = None
) -> ScoreBreakdown:
    """Summarise a profile in the shape stored alongside a conversation."""
    calculated_at = calculated_at or datetime.now(timezone.utc)
    features = profile.features
    return ScoreBreakdown(
        overall=profile.score,
        astrological=profile.score,
        breakdown=ScoreDetails(
            harmonious_aspects=features.harmonious_aspects,
            challenging_aspects=features.challenging_aspects,
            weighted_score=round(calculate_raw_score(features), 1),
            key_connections=list(features.key_connections),
            dominant_theme=profile.dominant_theme.name,
        ),
        poetic_headline=profile.headline,
        ai_insight=profile.insight,
        calculated_at=calculated_at.isoformat(),
        rarity_percentile=calculate_rarity(profile.score),
    )
