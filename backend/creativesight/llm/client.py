"""LangChain ChatAnthropic wrapper for the multimodal and text exchanges."""

from __future__ import annotations

import base64
import io
import logging
from typing import Any, Protocol

from PIL import Image, UnidentifiedImageError

from creativesight.config import Settings
from creativesight.llm.model_router import get_model_for_task

logger = logging.getLogger(__name__)

_FALLBACK_MEDIA_TYPE = "image/jpeg"
_SUPPORTED_MEDIA_TYPES = {"image/jpeg", "image/png", "image/gif", "image/webp"}


class CompletionClient(Protocol):
    async def complete_vision(self, image_bytes: bytes, prompt: str, task: str) -> str: ...

    async def complete_text(self, prompt: str, task: str) -> str: ...


def sniff_media_type(image_bytes: bytes) -> str:
    """MIME type from the image header, or image/jpeg when Pillow can't tell."""
    try:
        with Image.open(io.BytesIO(image_bytes)) as img:
            mime = Image.MIME.get(img.format or "")
    except (UnidentifiedImageError, OSError, ValueError):
        return _FALLBACK_MEDIA_TYPE
    return mime if mime in _SUPPORTED_MEDIA_TYPES else _FALLBACK_MEDIA_TYPE


def _content_text(content: Any) -> str:
    """Flatten an AIMessage content (str or list of blocks) into plain text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return str(content)


class AnthropicClient:
    """One request per call: retries are disabled so each exchange is attempted once."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def _llm(self, task: str, max_tokens: int):
        from langchain_anthropic import ChatAnthropic

        model_id = get_model_for_task(task, self.settings)
        logger.debug("Remote %s exchange using %s", task, model_id)
        return ChatAnthropic(
            model=model_id,
            api_key=self.settings.anthropic_api_key,
            max_tokens=max_tokens,
            timeout=self.settings.remote_timeout_s,
            max_retries=0,
        )

    async def complete_vision(self, image_bytes: bytes, prompt: str, task: str) -> str:
        from langchain_core.messages import HumanMessage

        llm = self._llm(task, self.settings.max_tokens_analysis)
        message = HumanMessage(
            content=[
                {
                    "type": "image",
                    "source": {
                        "type": "base64",
                        "media_type": sniff_media_type(image_bytes),
                        "data": base64.b64encode(image_bytes).decode("ascii"),
                    },
                },
                {
                    "type": "text",
                    "text": prompt,
                },
            ]
        )
        response = await llm.ainvoke([message])
        return _content_text(response.content)

    async def complete_text(self, prompt: str, task: str) -> str:
        from langchain_core.messages import HumanMessage

        llm = self._llm(task, self.settings.max_tokens_aux)
        response = await llm.ainvoke([HumanMessage(content=prompt)])
        return _content_text(response.content)
