from .errors import (
    AdviceError,
    MalformedResponseError,
    MissingCredentialError,
    ProviderUnavailableError,
    QuotaExceededError,
)
from .prompt import advice_schema, build_prompt
from .llm import LLMClient
from .advice import (
    AdviceCoordinator,
    AdviceSlot,
    AdviceGenerator,
    AdviceResult,
    build_advice_generator,
    parse_advice_response,
)

__all__ = [
    "AdviceError",
    "MalformedResponseError",
    "MissingCredentialError",
    "ProviderUnavailableError",
    "QuotaExceededError",
    "advice_schema",
    "build_prompt",
    "LLMClient",
    "AdviceCoordinator",
    "AdviceSlot",
    "AdviceGenerator",
    "AdviceResult",
    "build_advice_generator",
    "parse_advice_response",
]
