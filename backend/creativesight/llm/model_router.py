"""Exchange → model selection. Mid-tier vision for compliance, cheap tier for the text exchanges."""

from __future__ import annotations

from creativesight.config import Settings, settings as default_settings

_TASK_MODEL_MAP = {
    "compliance": "mid",
    "heatmap": "cheap",
    "placements": "cheap",
}


def get_model_for_task(task: str, settings: Settings | None = None) -> str:
    settings = settings or default_settings
    tier = _TASK_MODEL_MAP.get(task, "cheap")
    if tier == "cheap":
        return settings.model_cheap
    elif tier == "mid":
        return settings.model_mid
    else:
        return settings.model_frontier
