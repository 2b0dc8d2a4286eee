"""Tests for the client helpers and model routing (no network)."""

from __future__ import annotations

from creativesight.config import Settings
from creativesight.llm.client import AnthropicClient, _content_text, sniff_media_type
from creativesight.llm.model_router import get_model_for_task
from creativesight.llm.prompts import get_all_templates, get_prompt_template


def test_model_routing():
    settings = Settings(anthropic_api_key="", model_cheap="cheap-1", model_mid="mid-1")
    assert get_model_for_task("compliance", settings) == "mid-1"
    assert get_model_for_task("heatmap", settings) == "cheap-1"
    assert get_model_for_task("placements", settings) == "cheap-1"
    assert get_model_for_task("unknown", settings) == "cheap-1"


def test_sniff_png(split_png):
    assert sniff_media_type(split_png) == "image/png"


def test_sniff_unknown_defaults_to_jpeg():
    assert sniff_media_type(b"garbage") == "image/jpeg"


def test_content_text_blocks():
    content = [{"type": "text", "text": '{"a": '}, {"type": "tool_use"}, "1}"]
    assert _content_text(content) == '{"a": 1}'
    assert _content_text("plain") == "plain"


def test_prompts_format_cleanly():
    compliance = get_prompt_template("compliance").format(
        retailer_context="Target (tgt-1)", placement_context="Endcap (end-2)"
    )
    assert "Target (tgt-1)" in compliance
    assert "complianceChecks" in compliance
    heatmap = get_prompt_template("heatmap").format(metrics_json='{"compliance": 80}')
    assert '{"compliance": 80}' in heatmap
    assert set(get_all_templates()) == {"compliance", "heatmap", "placements"}


def test_anthropic_client_single_attempt():
    settings = Settings(anthropic_api_key="sk-test")
    llm = AnthropicClient(settings)._llm("compliance", 2000)
    assert llm.max_retries == 0
    assert llm.default_request_timeout == 60
    assert llm.max_tokens == 2000
    assert llm.model == settings.model_mid


def test_anthropic_client_timeout_from_settings():
    settings = Settings(anthropic_api_key="sk-test", remote_timeout_s=5)
    llm = AnthropicClient(settings)._llm("heatmap", 1000)
    assert llm.default_request_timeout == 5
    assert llm.model == settings.model_cheap
