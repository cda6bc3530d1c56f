import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

from salesboard.config.dashboard_config import AdviceConfig, DashboardConfig
from salesboard.core.models import DashboardData, PeriodProgress, SalesMetric, SalesRep
from salesboard.core.snapshot import GenerationGate
from salesboard.narrative.errors import (
    AdviceError,
    MalformedResponseError,
    MissingCredentialError,
)
from salesboard.narrative.llm import LLMClient, classify_provider_error
from salesboard.narrative.prompt import advice_schema, build_prompt

logger = logging.getLogger(__name__)


class StructuredClient(Protocol):
    def generate_json(self, prompt: str, schema: Dict[str, Any]) -> str:
        ...


# =====================================================
# RESPONSE CONTRACT
# =====================================================

def parse_advice_response(text: str, limit: Optional[int] = None) -> List[str]:
    """
    Unwrap ``{"advice": [...]}`` into a list of strings.

    Fails closed: anything other than a non-empty list of non-empty
    strings raises MalformedResponseError.
    """
    try:
        result = json.loads(text)
    except (TypeError, ValueError) as e:
        raise MalformedResponseError(f"Response is not valid JSON: {text!r:.200}") from e

    if not isinstance(result, dict):
        raise MalformedResponseError(f"Response is not a JSON object: {result!r:.200}")

    advice = result.get("advice")
    if not isinstance(advice, list) or not advice:
        raise MalformedResponseError(f"Response has no advice list: {result!r:.200}")

    items: List[str] = []
    for item in advice:
        if not isinstance(item, str) or not item.strip():
            raise MalformedResponseError(f"Advice item is not a non-empty string: {item!r}")
        items.append(item.strip())

    return items[:limit] if limit else items


# =====================================================
# GENERATOR
# =====================================================

class AdviceGenerator:
    """
    Metrics -> prompt -> structured LLM call -> validated advice list.

    No caching: every call goes to the provider.
    """

    def __init__(
        self,
        config: Optional[AdviceConfig] = None,
        client: Optional[StructuredClient] = None,
        rate_labels: Iterable[str] = (),
    ):
        self.config = config or AdviceConfig()
        self.rate_labels = tuple(rate_labels)
        self.client = client if client is not None else LLMClient(self.config)

    def build_prompt(
        self,
        metrics: Sequence[SalesMetric],
        period_progress: PeriodProgress,
        daily_ranking: Sequence[SalesRep],
    ) -> str:
        return build_prompt(
            metrics,
            period_progress,
            daily_ranking,
            count=self.config.count,
            max_chars=self.config.max_chars,
            rate_labels=self.rate_labels,
        )

    def generate_advice(
        self,
        metrics: Sequence[SalesMetric],
        period_progress: PeriodProgress,
        daily_ranking: Sequence[SalesRep],
    ) -> List[str]:
        prompt = self.build_prompt(metrics, period_progress, daily_ranking)
        schema = advice_schema(self.config.count, self.config.max_chars)

        try:
            text = self.client.generate_json(prompt, schema)
        except AdviceError:
            raise
        except Exception as e:
            raise classify_provider_error(e) from e

        try:
            return parse_advice_response(text, limit=self.config.count)
        except MalformedResponseError:
            logger.error("AI response did not match expected format or was empty: %.300s", text)
            raise

    def generate_for(self, data: DashboardData) -> List[str]:
        return self.generate_advice(
            data.individual_metrics,
            data.period_progress,
            data.daily_sales_ranking,
        )


def build_advice_generator(config: Optional[DashboardConfig] = None) -> AdviceGenerator:
    config = config or DashboardConfig()
    return AdviceGenerator(
        config=config.advice,
        rate_labels=config.display.rate_labels,
    )


# =====================================================
# SUPERSESSION
# =====================================================

@dataclass(frozen=True)
class AdviceResult:
    advice: Tuple[str, ...]
    generation: int
    source_generation: Optional[int] = None


class AdviceCoordinator:
    """
    One consumer's view of the advice pipeline.

    Each request takes a new generation token; a request that has been
    superseded by a newer one drops its result (or error) and returns None.
    A missing credential found while building the generator is kept and
    re-raised by every request without touching the network.
    """

    def __init__(self, generator_factory: Callable[[], AdviceGenerator]):
        self._gate = GenerationGate()
        self._generator: Optional[AdviceGenerator] = None
        self._init_error: Optional[MissingCredentialError] = None

        try:
            self._generator = generator_factory()
        except MissingCredentialError as e:
            logger.error("Advice generator unavailable: %s", e)
            self._init_error = e

    @property
    def init_error(self) -> Optional[MissingCredentialError]:
        return self._init_error

    @property
    def latest_generation(self) -> int:
        return self._gate.issued

    def request(
        self,
        data: DashboardData,
        source_generation: Optional[int] = None,
    ) -> Optional[AdviceResult]:
        if self._init_error is not None:
            raise MissingCredentialError(self._init_error.detail) from self._init_error

        token = self._gate.next_token()

        try:
            advice = self._generator.generate_for(data)
        except AdviceError:
            if not self._gate.is_current(token):
                logger.debug("Dropping error from superseded advice request %s", token)
                return None
            raise

        if not self._gate.is_current(token):
            logger.debug("Dropping result from superseded advice request %s", token)
            return None

        return AdviceResult(
            advice=tuple(advice),
            generation=token,
            source_generation=source_generation,
        )


class AdviceSlot:
    """
    Advice shown for one snapshot.

    Settles on a result or an error. A superseded request leaves the slot
    unsettled so the next render asks again.
    """

    def __init__(self):
        self.data: Optional[DashboardData] = None
        self.advice: Optional[List[str]] = None
        self.error: Optional[AdviceError] = None

    def needs_update(self, data: DashboardData) -> bool:
        return self.data is not data

    def update(
        self,
        coordinator: AdviceCoordinator,
        data: DashboardData,
        source_generation: Optional[int] = None,
    ) -> None:
        try:
            result = coordinator.request(data, source_generation=source_generation)
        except AdviceError as e:
            self.data, self.advice, self.error = data, None, e
            return

        if result is None:
            return

        self.data, self.advice, self.error = data, list(result.advice), None
