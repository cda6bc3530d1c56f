class AdviceError(RuntimeError):
    """
    Base for advice pipeline failures.

    ``user_message`` is safe to show on the dashboard; the raw provider
    error is only kept on the exception chain and in the logs.
    """

    kind = "unknown"
    user_message = "AIアドバイスの生成中に不明なエラーが発生しました。"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.user_message)
        self.detail = detail


class MissingCredentialError(AdviceError):
    kind = "missing_credential"
    user_message = "APIキーが設定されていません。APIキーが正しく設定されているか確認してください。"


class QuotaExceededError(AdviceError):
    kind = "quota_exceeded"
    user_message = "APIの利用上限に達しました。しばらく時間をおいて再度お試しください。"


class MalformedResponseError(AdviceError):
    kind = "malformed_response"
    user_message = "AIから予期しない形式の応答がありました。"


class ProviderUnavailableError(AdviceError):
    kind = "provider_unavailable"
    user_message = (
        "AIからの応答がありませんでした。"
        "ネットワーク接続を確認するか、時間をおいて再度お試しください。"
    )
