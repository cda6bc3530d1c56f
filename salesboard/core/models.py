import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple


REQUIRED_FIELDS = ("periodProgress", "individualMetrics", "monthlySalesRanking")


class DataValidationError(ValueError):
    """Payload does not match the dashboard data shape."""


# =====================================================
# FIELD HELPERS
# =====================================================

def _number(payload: Mapping[str, Any], key: str, where: str) -> float:
    value = payload.get(key)
    if isinstance(value, bool) or value is None:
        raise DataValidationError(f"{where}.{key} must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        number = value
    else:
        try:
            number = float(value)
        except (TypeError, ValueError) as e:
            raise DataValidationError(
                f"{where}.{key} must be a number, got {value!r}"
            ) from e
    try:
        finite = math.isfinite(number)
    except OverflowError:
        # int too large for a float
        finite = False
    if not finite:
        raise DataValidationError(f"{where}.{key} must be finite, got {value!r}")
    return number


def _optional_number(payload: Mapping[str, Any], key: str, where: str) -> Optional[float]:
    if payload.get(key) is None:
        return None
    return _number(payload, key, where)


def _mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DataValidationError(f"{where} must be an object")
    return value


def _sequence(value: Any, where: str) -> List[Any]:
    if not isinstance(value, (list, tuple)):
        raise DataValidationError(f"{where} must be a list")
    return list(value)


def _drop_none(values: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in values.items() if v is not None}


# =====================================================
# MODELS
# =====================================================

@dataclass(frozen=True)
class PeriodProgress:
    current: float
    target: float
    unit: str = ""
    official: Optional[float] = None

    @classmethod
    def from_dict(cls, payload: Any) -> "PeriodProgress":
        payload = _mapping(payload, "periodProgress")
        return cls(
            current=_number(payload, "current", "periodProgress"),
            target=_number(payload, "target", "periodProgress"),
            unit=str(payload.get("unit") or ""),
            official=_optional_number(payload, "official", "periodProgress"),
        )

    @property
    def remaining(self) -> float:
        return max(self.target - self.current, 0)

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            "current": self.current,
            "target": self.target,
            "unit": self.unit,
            "official": self.official,
        })


@dataclass(frozen=True)
class DailyTarget:
    target: float
    unit: str = ""

    @classmethod
    def from_dict(cls, payload: Any) -> "DailyTarget":
        payload = _mapping(payload, "dailyTarget")
        return cls(
            target=_number(payload, "target", "dailyTarget"),
            unit=str(payload.get("unit") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"target": self.target, "unit": self.unit}


@dataclass(frozen=True)
class SalesMetric:
    label: str
    current: float
    target: float
    unit: str = ""

    @classmethod
    def from_dict(cls, payload: Any, index: int = 0) -> "SalesMetric":
        where = f"individualMetrics[{index}]"
        payload = _mapping(payload, where)
        label = payload.get("label")
        if not isinstance(label, str) or not label:
            raise DataValidationError(f"{where}.label must be a non-empty string")
        return cls(
            label=label,
            current=_number(payload, "current", where),
            target=_number(payload, "target", where),
            unit=str(payload.get("unit") or ""),
        )

    @property
    def is_target_met(self) -> bool:
        return self.target > 0 and self.current >= self.target

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "current": self.current,
            "target": self.target,
            "unit": self.unit,
        }


@dataclass(frozen=True)
class SalesRep:
    rank: int
    name: str
    points: float
    award_count: Optional[int] = None

    @classmethod
    def from_dict(cls, payload: Any, where: str = "ranking") -> "SalesRep":
        payload = _mapping(payload, where)
        rank = _number(payload, "rank", where)
        if rank < 1 or int(rank) != rank:
            raise DataValidationError(f"{where}.rank must be a positive integer, got {rank!r}")
        award_count = _optional_number(payload, "awardCount", where)
        return cls(
            rank=int(rank),
            name=str(payload.get("name") or ""),
            points=_number(payload, "points", where),
            award_count=int(award_count) if award_count is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none({
            "rank": self.rank,
            "name": self.name,
            "points": self.points,
            "awardCount": self.award_count,
        })


def _parse_ranking(value: Any, name: str) -> Tuple[SalesRep, ...]:
    reps = [
        SalesRep.from_dict(item, f"{name}[{i}]")
        for i, item in enumerate(_sequence(value, name))
    ]
    ranks = [rep.rank for rep in reps]
    if len(set(ranks)) != len(ranks):
        raise DataValidationError(f"{name} contains duplicate ranks: {ranks}")
    return tuple(sorted(reps, key=lambda rep: rep.rank))


# =====================================================
# AGGREGATE ROOT
# =====================================================

@dataclass(frozen=True)
class DashboardData:
    """
    One complete dashboard snapshot.

    Immutable: a refresh replaces the whole snapshot, never patches it.
    Rankings are held in rank order (rank 1 first).
    """
    period_progress: PeriodProgress
    daily_target: DailyTarget
    individual_metrics: Tuple[SalesMetric, ...] = field(default_factory=tuple)
    monthly_sales_ranking: Tuple[SalesRep, ...] = field(default_factory=tuple)
    daily_sales_ranking: Tuple[SalesRep, ...] = field(default_factory=tuple)

    @staticmethod
    def missing_fields(payload: Any) -> List[str]:
        if not isinstance(payload, Mapping):
            return list(REQUIRED_FIELDS)
        return [key for key in REQUIRED_FIELDS if payload.get(key) is None]

    @classmethod
    def from_dict(cls, payload: Any) -> "DashboardData":
        if not isinstance(payload, Mapping):
            raise DataValidationError(
                f"Dashboard payload must be a JSON object, got {type(payload).__name__}"
            )

        missing = cls.missing_fields(payload)
        if missing:
            raise DataValidationError(
                f"Dashboard payload missing required fields: {', '.join(missing)}"
            )

        period = PeriodProgress.from_dict(payload["periodProgress"])

        if payload.get("dailyTarget") is None:
            daily = DailyTarget(target=0, unit=period.unit)
        else:
            daily = DailyTarget.from_dict(payload["dailyTarget"])

        metrics = tuple(
            SalesMetric.from_dict(item, i)
            for i, item in enumerate(_sequence(payload["individualMetrics"], "individualMetrics"))
        )

        return cls(
            period_progress=period,
            daily_target=daily,
            individual_metrics=metrics,
            monthly_sales_ranking=_parse_ranking(
                payload["monthlySalesRanking"], "monthlySalesRanking"
            ),
            daily_sales_ranking=_parse_ranking(
                payload.get("dailySalesRanking") or [], "dailySalesRanking"
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "periodProgress": self.period_progress.to_dict(),
            "dailyTarget": self.daily_target.to_dict(),
            "individualMetrics": [m.to_dict() for m in self.individual_metrics],
            "monthlySalesRanking": [r.to_dict() for r in self.monthly_sales_ranking],
            "dailySalesRanking": [r.to_dict() for r in self.daily_sales_ranking],
        }
