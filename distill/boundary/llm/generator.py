"""
Generative collaborator.

Produces text for answers, summaries and flow steps by trying Gemini chat
first and Bedrock Converse second. Any failure of a tier (missing key,
transport error, empty reply) yields None for that tier; the collaborator
as a whole returns None when no tier answers. It never raises.

Dependencies: langchain_google_genai, langchain_aws, langchain_core, boto3
System role: Text generation adapter
"""

import logging
import os
from typing import Literal

import boto3
from langchain_aws import ChatBedrockConverse
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from distill.configs.generation import GenerationSettings

logger = logging.getLogger(__name__)

ExpectedFormat = Literal["text", "json"]


def build_messages(system: str | None, user: str) -> list[BaseMessage]:
    messages: list[BaseMessage] = []
    if system:
        messages.append(SystemMessage(content=system))
    messages.append(HumanMessage(content=user))
    return messages


def message_text(content: str | list) -> str:
    """Flatten chat model content (plain string or content blocks) to text."""
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class GenerativeClient:
    """Gemini → Bedrock chat fallback returning text or None."""

    def __init__(self, settings: GenerationSettings) -> None:
        """
        Initialize generator with model settings.

        Args:
            settings: Generation settings (models, keys, temperature)
        """
        self._settings = settings
        self._google_key = (
            settings.google_api_key.get_secret_value()
            if settings.google_api_key
            else os.getenv("GOOGLE_API_KEY")
        )
        self._models: dict[tuple[str, ExpectedFormat], BaseChatModel] = {}

    def _google_model(self, expect: ExpectedFormat) -> BaseChatModel | None:
        if not self._settings.google_enabled or not self._google_key:
            return None
        key = ("google", expect)
        if key not in self._models:
            kwargs = {"response_mime_type": "application/json"} if expect == "json" else {}
            self._models[key] = ChatGoogleGenerativeAI(
                model=self._settings.google_model,
                temperature=self._settings.temperature,
                google_api_key=self._google_key,
                **kwargs,
            )
        return self._models[key]

    def _bedrock_model(self, expect: ExpectedFormat) -> BaseChatModel | None:
        if not self._settings.bedrock_enabled:
            return None
        try:
            credentials = boto3.Session(
                region_name=self._settings.bedrock_region
            ).get_credentials()
        except Exception as e:
            logger.debug(f"{__name__}:_bedrock_model - credential lookup failed: {e}")
            credentials = None
        if credentials is None:
            return None
        key = ("bedrock", "text")
        if key not in self._models:
            self._models[key] = ChatBedrockConverse(
                model=self._settings.bedrock_model_id,
                region_name=self._settings.bedrock_region,
                temperature=self._settings.temperature,
            )
        return self._models[key]

    async def _try(self, name: str, model: BaseChatModel | None, messages: list[BaseMessage]) -> str | None:
        if model is None:
            logger.debug(f"{__name__}:generate - {name} tier unavailable (disabled or no credentials)")
            return None
        try:
            response = await model.ainvoke(messages)
        except Exception as e:
            logger.warning(f"{__name__}:generate - {name} tier failed ({type(e).__name__}): {e}")
            return None
        text = message_text(response.content).strip()
        return text or None

    async def generate(
        self,
        system: str | None,
        user: str,
        expect: ExpectedFormat = "text",
    ) -> str | None:
        """
        Generate text for a prompt.

        Args:
            system: System prompt (optional)
            user: User prompt
            expect: "text" or "json"

        Returns:
            str | None: Generated text, or None when every tier failed
        """
        messages = build_messages(system, user)
        text = await self._try("gemini", self._google_model(expect), messages)
        if text is not None:
            return text
        return await self._try("bedrock", self._bedrock_model(expect), messages)
