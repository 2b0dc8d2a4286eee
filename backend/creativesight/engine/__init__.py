"""CreativeSight analysis engine."""

from creativesight.engine.features import DEFAULT_PROFILE, extract_features
from creativesight.engine.heuristics import ComplianceFindings, synthesize
from creativesight.engine.risk import band_for, score

__all__ = [
    "DEFAULT_PROFILE",
    "extract_features",
    "ComplianceFindings",
    "synthesize",
    "band_for",
    "score",
]
