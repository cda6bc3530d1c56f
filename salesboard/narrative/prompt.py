# salesboard/narrative/prompt.py

from typing import Iterable, Sequence

from salesboard.core.models import PeriodProgress, SalesMetric, SalesRep
from salesboard.core.progress import (
    format_metric_value,
    format_value,
    is_target_met,
    progress_percent,
    round_half_up,
)

TARGET_MET_MARKER = "【目標達成】"


def advice_schema(count: int = 3, max_chars: int = 150) -> dict:
    """Structured-output constraint: {"advice": [str, ...]}."""
    return {
        "type": "OBJECT",
        "properties": {
            "advice": {
                "type": "ARRAY",
                "description": f"モチベーションを高めるための{count}つの具体的なアドバイスのリスト。",
                "items": {
                    "type": "STRING",
                    "description": f"{max_chars}文字以内のポジティブなアドバイス",
                },
            },
        },
        "required": ["advice"],
    }


# =====================================================
# SECTION SUMMARIES
# =====================================================

def metric_line(metric: SalesMetric, rate_labels: Iterable[str] = ()) -> str:
    rate_labels = tuple(rate_labels)
    progress = round_half_up(progress_percent(metric.current, metric.target))
    marker = TARGET_MET_MARKER if is_target_met(metric.current, metric.target) else ""

    return (
        f"- {metric.label}: "
        f"{format_metric_value(metric, metric.current, rate_labels)} / "
        f"{format_metric_value(metric, metric.target, rate_labels)} "
        f"(進捗 {progress}%) {marker}"
    ).rstrip()


def summarize_metrics(metrics: Sequence[SalesMetric], rate_labels: Iterable[str] = ()) -> str:
    rate_labels = tuple(rate_labels)
    return "\n".join(metric_line(m, rate_labels) for m in metrics)


def summarize_period(period: PeriodProgress) -> str:
    rate = period.unit == "%"
    official = ""
    if period.official is not None:
        official = f" (内、確定実績: {format_value(period.official, period.unit, rate=rate)})"

    progress = round_half_up(progress_percent(period.current, period.target))
    return (
        f"期間進捗: {format_value(period.current, period.unit, rate=rate)}{official} / "
        f"{format_value(period.target, period.unit, rate=rate)} (進捗 {progress}%)"
    )


def summarize_ranking(ranking: Sequence[SalesRep]) -> str:
    ordered = sorted(ranking, key=lambda rep: rep.rank)
    return "\n".join(
        f"- {rep.rank}位: {rep.name}さん ({format_value(rep.points, 'P')})"
        for rep in ordered
    )


# =====================================================
# FULL PROMPT
# =====================================================

def build_prompt(
    metrics: Sequence[SalesMetric],
    period_progress: PeriodProgress,
    daily_ranking: Sequence[SalesRep],
    count: int = 3,
    max_chars: int = 150,
    rate_labels: Iterable[str] = (),
) -> str:
    """
    Render the coaching instruction sent to the model.

    Pure function of its inputs. Metrics that reached their target carry
    the 【目標達成】 marker so the model praises them; the rest get
    improvement proposals.
    """
    metrics_summary = summarize_metrics(metrics, rate_labels)
    period_summary = summarize_period(period_progress)
    ranking_summary = summarize_ranking(daily_ranking)

    return f"""
# 役割
あなたはソフトバンクショップを運営する優秀な店舗マネージャーです。ソフトバンクショップは、店舗評価を確保する為に、各商材毎に決められた目標数を必ず達成します。またそれぞれの目標数は、必達目標と言って、必ず達成しなければならない数字です。
そして営業第一本部の支援金制度や評価条件を完全に理解しています。

# 状況
以下に、期間別の進捗概要（{period_summary}）、個別数値の詳細（{metrics_summary}）、および本日のデイリーランキング（{ranking_summary}）が与えられます。
これらは店舗クルーの営業実績を表しており、目標とのギャップが明確に把握できます。

# 目的
与えられたデータを基に、クルーのモチベーションを高め、即日行動につながるアドバイスを作成してください。以下の価値観を必ず反映します。
・目標達成に向け、ギャップを埋めるためのアクションを重視
・アクションは単純で地道なものに落とし込む
・凡事徹底を要素に含める

# 出力形式
・{count}つの簡潔な箇条書きリスト
・{count}つの文章は全体数値に関して、進捗や目標件数に対して残り日数を意識したアドバイス
・各アドバイスは{max_chars}文字以内
・{TARGET_MET_MARKER}の指標は必ず称賛し、未達成の指標は前向きな改善提案を行う
・全体が「よし、今日も頑張ろう！」と思える力強い言葉になること、松岡修造のように熱いメッセージ
・トーン例：「あと目標まで〇〇件！この調子で□□を意識しましょう。」

# 入力データ
期間進捗概要：
{period_summary}

個別数値の詳細：
{metrics_summary}

本日のデイリーランキング：
{ranking_summary}
"""
