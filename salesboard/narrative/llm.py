import logging
from typing import Any, Dict, Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from salesboard.config.dashboard_config import AdviceConfig
from salesboard.narrative.errors import (
    AdviceError,
    MissingCredentialError,
    ProviderUnavailableError,
    QuotaExceededError,
)

logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("gemini", "openai")

QUOTA_MARKERS = ("429", "RESOURCE_EXHAUSTED", "quota")
CREDENTIAL_MARKERS = ("API_KEY", "API key", "api_key")

SYSTEM_PROMPT = (
    "You are an experienced retail shop manager coaching your sales crew. "
    "Reply with a single JSON object only."
)


def classify_provider_error(exc: Exception) -> AdviceError:
    """Map a raw provider/transport exception onto the advice error kinds."""
    if isinstance(exc, AdviceError):
        return exc

    text = str(exc)
    status = getattr(exc, "status_code", None) or getattr(exc, "code", None)

    if isinstance(exc, google_exceptions.ResourceExhausted) or status == 429:
        return QuotaExceededError(text)
    if any(marker in text for marker in QUOTA_MARKERS):
        return QuotaExceededError(text)
    if any(marker in text for marker in CREDENTIAL_MARKERS):
        return MissingCredentialError(text)
    return ProviderUnavailableError(text)


class LLMClient:
    """
    Provider-agnostic structured-output client

    Supported providers:
    - gemini (default, google-generativeai)
    - openai (optional extra)

    The credential is checked here, once, so a missing key fails at
    construction instead of on every call.
    """

    def __init__(self, config: Optional[AdviceConfig] = None):
        config = config or AdviceConfig()

        self.provider = config.provider
        if self.provider not in SUPPORTED_PROVIDERS:
            raise ValueError(f"Unsupported LLM provider: {self.provider}")

        self.model = config.resolved_model
        self.temperature = config.temperature
        self.max_tokens = config.max_tokens

        self._api_key = config.resolve_api_key()
        if not self._api_key:
            raise MissingCredentialError(f"{config.key_env_name} is missing")

    # -------------------------------------------------
    # PUBLIC
    # -------------------------------------------------

    def generate_json(self, prompt: str, schema: Dict[str, Any]) -> str:
        """Return the raw JSON text produced for ``prompt`` under ``schema``."""
        if not prompt or not isinstance(prompt, str):
            raise ValueError("Prompt must be a non-empty string")

        try:
            if self.provider == "openai":
                return self._call_openai(prompt, schema)
            return self._call_gemini(prompt, schema)

        except Exception as e:
            error = classify_provider_error(e)
            logger.error(
                "%s LLM call failed (%s): %s",
                self.provider.upper(),
                error.kind,
                e,
            )
            if error is e:
                raise
            raise error from e

    # -------------------------------------------------
    # PROVIDERS
    # -------------------------------------------------

    def _call_gemini(self, prompt: str, schema: Dict[str, Any]) -> str:
        genai.configure(api_key=self._api_key)
        model = genai.GenerativeModel(self.model)

        response = model.generate_content(
            prompt,
            generation_config={
                "temperature": self.temperature,
                "max_output_tokens": self.max_tokens,
                "response_mime_type": "application/json",
                "response_schema": schema,
            },
        )

        return (getattr(response, "text", None) or "").strip()

    def _call_openai(self, prompt: str, schema: Dict[str, Any]) -> str:
        try:
            from openai import OpenAI
        except ImportError as e:
            raise ProviderUnavailableError(
                "openai package not installed"
            ) from e

        client = OpenAI(api_key=self._api_key)

        response = client.chat.completions.create(
            model=self.model,
            messages=[
                {
                    "role": "system",
                    "content": f"{SYSTEM_PROMPT} JSON schema: {schema}",
                },
                {"role": "user", "content": prompt},
            ],
            response_format={"type": "json_object"},
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

        content: Optional[str] = response.choices[0].message.content
        return (content or "").strip()
