from .resolver import Resolution, resolve
from .strategies import (
    DEFAULT_STRATEGIES,
    CandidateStrategy,
    ConfiguredOverride,
    DocumentHeading,
    ExplicitPath,
    ProjectDirName,
    ResolveRequest,
    UserHint,
)

__all__ = [
    "DEFAULT_STRATEGIES",
    "CandidateStrategy",
    "ConfiguredOverride",
    "DocumentHeading",
    "ExplicitPath",
    "ProjectDirName",
    "Resolution",
    "ResolveRequest",
    "UserHint",
    "resolve",
]
