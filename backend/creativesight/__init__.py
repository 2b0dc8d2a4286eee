"""CreativeSight — retail creative compliance and risk scoring."""

from creativesight.engine.orchestrator import CreativeEngine, analyze_creative

__all__ = ["CreativeEngine", "analyze_creative"]
