from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Dict, Any, Tuple


class AspectData(BaseModel):
    type: str
    a: str
    b: str
    orb: Optional[float] = None


class FeatureSet(BaseModel):
    total_aspects: int = 0
    harmonious_aspects: int = 0
    challenging_aspects: int = 0
    neutral_aspects: int = 0

    moon_venus_links: int = 0
    mercury_links: int = 0
    mars_links: int = 0
    pluto_links: int = 0
    saturn_links: int = 0
    jupiter_links: int = 0
    node_links: int = 0

    dominant_element: Optional[str] = None
    dominant_mode: Optional[str] = None
    missing_element: Optional[str] = None

    average_orb: float = 0.0
    tight_conjunctions: int = 0

    has_saturn: bool = False
    has_pluto: bool = False
    has_nodes: bool = False

    key_connections: List[str] = Field(default_factory=list)


class Theme(BaseModel):
    name: str
    weight: float
    signals: List[str] = Field(default_factory=list)


class Archetype(BaseModel):
    id: str
    name: str
    description: str
    tone: str
    keywords: Tuple[str, ...]
    color_scheme: str

    model_config = ConfigDict(frozen=True)


class ConnectionProfile(BaseModel):
    score: int
    features: FeatureSet
    themes: List[Theme]
    dominant_theme: Theme
    archetype: Archetype
    headline: str
    subheadline: str
    insight: str
    keywords: List[str]
    color_scheme: str


class ScoreDetails(BaseModel):
    harmonious_aspects: int
    challenging_aspects: int
    weighted_score: float
    key_connections: List[str]
    dominant_theme: str


class ScoreBreakdown(BaseModel):
    overall: int
    astrological: int
    breakdown: ScoreDetails
    poetic_headline: str
    ai_insight: str
    calculated_at: str
    rarity_percentile: int


class SyncProfileRequest(BaseModel):
    swiss_data: Dict[str, Any]
