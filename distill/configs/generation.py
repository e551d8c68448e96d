"""
Generative collaborator configuration.

Dependencies: pydantic, pydantic_settings
System role: Chat model selection for answers and flow steps
"""

from pydantic import Field, SecretStr

from distill.configs.base import BaseSettings, group_config


class GenerationSettings(BaseSettings):
    """Chat model tiers and output acceptance threshold."""

    model_config = group_config("LLM_")

    google_enabled: bool = Field(default=True, description="Try Gemini chat first")
    google_api_key: SecretStr | None = Field(
        default=None,
        description="Gemini API key (falls back to GOOGLE_API_KEY)",
    )
    google_model: str = Field(default="gemini-1.5-flash", description="Gemini chat model")

    bedrock_enabled: bool = Field(default=True, description="Try Bedrock Converse second")
    bedrock_model_id: str = Field(
        default="anthropic.claude-3-haiku-20240307-v1:0",
        description="Bedrock Converse model ID",
    )
    bedrock_region: str = Field(default="us-east-1", description="AWS region for Bedrock")

    temperature: float = Field(default=0.3, description="Sampling temperature")
    min_output_chars: int = Field(
        default=30,
        description="Outputs shorter than this are treated as unavailable",
    )
