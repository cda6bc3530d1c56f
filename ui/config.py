"""
UI defaults for salesboard
Purely presentation-level config
"""

APP_NAME = "実績ダッシュボード"
APP_SUBTITLE = "昨日までの実績サマリー"

RANK_COLORS = {
    "gold": "#fbbf24",
    "silver": "#cbd5e1",
    "bronze": "#d97706",
    "default": "#94a3b8",
}
SCORE_COLOR = "#22d3ee"
TARGET_MET_COLOR = "#f97316"
IN_PROGRESS_COLOR = "#22d3ee"

LOADING_TEXT = "データを読み込んでいます..."
ADVICE_LOADING_TEXT = "AIがアドバイスを生成中..."
STALE_BANNER = "データの自動更新に失敗しました。古いデータが表示されている可能性があります。"
FALLBACK_NOTICE = "ライブデータを取得できなかったため、サンプルデータを表示しています。"
LOAD_ERROR = "データを表示できませんでした。"
ADVICE_ERROR_TITLE = "AIアドバイスの取得に失敗"
ADVICE_ERROR_HINT = "APIキーが正しく設定されているか確認してください。"
