import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .defaults import DEFAULT_DATA_URL


PROVIDER_DEFAULT_MODELS = {
    "gemini": "gemini-2.5-flash",
    "openai": "gpt-4o-mini",
}

PROVIDER_KEY_ENVS = {
    "gemini": "GEMINI_API_KEY",
    "openai": "OPENAI_API_KEY",
}


def _optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


# -------------------------------------------------
# DATA SOURCE
# -------------------------------------------------
@dataclass(frozen=True)
class DataSourceConfig:
    url: str = DEFAULT_DATA_URL
    timeout_seconds: Optional[float] = None
    refresh_interval_seconds: float = 300.0

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "DataSourceConfig":
        interval = float(values.get("refresh_interval_seconds", 300))
        if interval <= 0:
            raise ValueError("refresh_interval_seconds must be positive")

        return cls(
            url=str(values.get("url") or DEFAULT_DATA_URL),
            timeout_seconds=_optional_float(values.get("timeout_seconds")),
            refresh_interval_seconds=interval,
        )


# -------------------------------------------------
# AI ADVICE
# -------------------------------------------------
@dataclass(frozen=True)
class AdviceConfig:
    """
    Settings for the advice pipeline.

    The API key is resolved once, when the generator is built:
    explicit ``api_key`` first, then the env var named by ``api_key_env``
    (provider default when unset).
    """
    provider: str = "gemini"
    model: Optional[str] = None
    api_key: Optional[str] = None
    api_key_env: Optional[str] = None
    temperature: float = 0.7
    max_tokens: int = 1024
    count: int = 3
    max_chars: int = 150

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "AdviceConfig":
        provider = str(values.get("provider") or "gemini").lower()
        count = int(values.get("count", 3))
        if count < 1:
            raise ValueError("advice.count must be at least 1")

        return cls(
            provider=provider,
            model=values.get("model"),
            api_key=values.get("api_key"),
            api_key_env=values.get("api_key_env"),
            temperature=float(values.get("temperature", 0.7)),
            max_tokens=int(values.get("max_tokens", 1024)),
            count=count,
            max_chars=int(values.get("max_chars", 150)),
        )

    @property
    def resolved_model(self) -> Optional[str]:
        return self.model or PROVIDER_DEFAULT_MODELS.get(self.provider)

    @property
    def key_env_name(self) -> Optional[str]:
        return self.api_key_env or PROVIDER_KEY_ENVS.get(self.provider)

    def resolve_api_key(self) -> Optional[str]:
        if self.api_key:
            return self.api_key
        if self.key_env_name:
            return os.getenv(self.key_env_name) or None
        return None


# -------------------------------------------------
# DISPLAY
# -------------------------------------------------
@dataclass(frozen=True)
class DisplayConfig:
    rate_labels: Tuple[str, ...] = ("ペイトク加入率",)

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "DisplayConfig":
        labels = values.get("rate_labels")
        if labels is None:
            return cls()
        if isinstance(labels, str):
            labels = [labels]
        return cls(rate_labels=tuple(str(label) for label in labels))


# -------------------------------------------------
# DASHBOARD CONFIG
# -------------------------------------------------
@dataclass(frozen=True)
class DashboardConfig:
    data_source: DataSourceConfig = field(default_factory=DataSourceConfig)
    advice: AdviceConfig = field(default_factory=AdviceConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "DashboardConfig":
        return cls(
            data_source=DataSourceConfig.from_dict(cfg.get("data_source") or {}),
            advice=AdviceConfig.from_dict(cfg.get("advice") or {}),
            display=DisplayConfig.from_dict(cfg.get("display") or {}),
        )
