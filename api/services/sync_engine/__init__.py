from .engine import (
    ENGINE_VERSION,
    build_score_breakdown,
    calculate_rarity,
    calculate_raw_score,
    calculate_score,
    generate_connection_profile,
)
from .feature_extractor import aspect_pairs, extract_features
from .theme_detector import detect_themes, get_dominant_theme
from .archetype_synthesizer import (
    ARCHETYPE_LIBRARY,
    derive_archetype,
    get_archetype_by_id,
    get_archetypes_for_theme,
)
from .text_renderer import (
    generate_ai_insight,
    generate_keywords,
    generate_poetic_headline,
    generate_subheadline,
)
