import logging
import threading
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional

from .models import DashboardData

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =====================================================
# GENERATION GATE
# =====================================================

class GenerationGate:
    """
    Issues increasing generation tokens for in-flight requests.

    ``try_apply`` admits a result only when no newer-initiated result has
    already been applied. ``is_current`` is stricter: only the most recently
    issued token counts.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._issued = 0
        self._applied = 0

    def next_token(self) -> int:
        with self._lock:
            self._issued += 1
            return self._issued

    def is_current(self, token: int) -> bool:
        with self._lock:
            return token == self._issued

    def try_apply(self, token: int) -> bool:
        with self._lock:
            if token <= self._applied:
                return False
            self._applied = token
            return True

    @property
    def issued(self) -> int:
        return self._issued

    @property
    def applied(self) -> int:
        return self._applied


# =====================================================
# SNAPSHOT STORE
# =====================================================

@dataclass(frozen=True)
class RefreshState:
    data: DashboardData
    generation: int
    is_fallback: bool = False
    has_live_data: bool = False
    stale_error: Optional[str] = None
    refreshed_at: datetime = field(default_factory=_utcnow)


class SnapshotStore:
    """
    Holds the latest dashboard snapshot. Latest initiated refresh wins:
    a slow older request that finishes after a newer one is discarded.
    """

    def __init__(self):
        self._gate = GenerationGate()
        self._lock = threading.Lock()
        self._state: Optional[RefreshState] = None

    def begin(self) -> int:
        return self._gate.next_token()

    @property
    def current(self) -> Optional[RefreshState]:
        return self._state

    @property
    def has_live_data(self) -> bool:
        state = self._state
        return bool(state and state.has_live_data)

    @property
    def is_initial_load(self) -> bool:
        return self._state is None

    def publish(
        self,
        token: int,
        data: DashboardData,
        is_fallback: bool = False,
    ) -> Optional[RefreshState]:
        with self._lock:
            if not self._gate.try_apply(token):
                logger.debug(
                    "Discarding refresh %s; generation %s already applied",
                    token,
                    self._gate.applied,
                )
                return None

            previous_live = bool(self._state and self._state.has_live_data)
            self._state = RefreshState(
                data=data,
                generation=token,
                is_fallback=is_fallback,
                has_live_data=previous_live or not is_fallback,
            )
            return self._state

    def mark_stale(self, token: int, error: str) -> Optional[RefreshState]:
        """Keep the current snapshot but flag that refresh ``token`` failed."""
        with self._lock:
            if self._state is None:
                return None
            if not self._gate.try_apply(token):
                logger.debug("Discarding stale marker for superseded refresh %s", token)
                return None

            self._state = replace(
                self._state,
                generation=token,
                stale_error=error,
                refreshed_at=_utcnow(),
            )
            return self._state
