from .sync import (
    AspectData,
    FeatureSet,
    Theme,
    Archetype,
    ConnectionProfile,
    ScoreBreakdown,
    ScoreDetails,
    SyncProfileRequest,
)
