DEFAULT_DATA_URL = (
    "https://script.google.com/macros/s/"
    "AKfycbzhQtj_DWZ6y4Pp3qc05K67ryxG_TacR1V7AMOQkS13qYlytfAoR-ByOEXfjYiIVcuV/exec"
)

DEFAULT_CONFIG = {
    # -----------------------------
    # LIVE DATA ENDPOINT
    # -----------------------------
    "data_source": {
        "url": DEFAULT_DATA_URL,
        "timeout_seconds": None,            # None = transport default
        "refresh_interval_seconds": 300,    # 5 minutes
    },

    # -----------------------------
    # AI ADVICE
    # -----------------------------
    "advice": {
        "provider": "gemini",               # gemini | openai
        "model": None,                      # provider default when omitted
        "api_key": None,
        "api_key_env": None,                # GEMINI_API_KEY / OPENAI_API_KEY
        "temperature": 0.7,
        "max_tokens": 1024,
        "count": 3,
        "max_chars": 150,
    },

    # -----------------------------
    # DISPLAY
    # -----------------------------
    "display": {
        # Metrics stored as a 0-1 fraction and shown as a percentage
        "rate_labels": ["ペイトク加入率"],
    },

    # -----------------------------
    # METADATA (OPTIONAL)
    # -----------------------------
    "metadata": {
        "app": "salesboard",
    },
}

# Environment variables that override config values
ENV_OVERRIDES = {
    "SALESBOARD_DATA_URL": ("data_source", "url"),
    "SALESBOARD_REFRESH_INTERVAL": ("data_source", "refresh_interval_seconds"),
    "SALESBOARD_AI_PROVIDER": ("advice", "provider"),
    "SALESBOARD_AI_MODEL": ("advice", "model"),
}
