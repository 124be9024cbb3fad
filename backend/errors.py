# errors.py
"""
Failures of an /analyze request. Each class knows the HTTP status and the
client-facing message; ``detail`` keeps the underlying cause for the logs.
"""


class AnalysisError(Exception):
    status_code = 500
    message = "Failed to analyze profile. Please try again."

    def __init__(self, detail: str = ""):
        self.detail = detail or self.message
        super().__init__(self.detail)


class ConfigurationError(AnalysisError):
    message = "Server misconfigured: API key missing"


class BadRequestError(AnalysisError):
    status_code = 400
    message = "Missing profileData in request body"


class UpstreamError(AnalysisError):
    """Non-success answer from the completion API."""

    def __init__(self, upstream_status: int = 0, body: str = ""):
        self.upstream_status = upstream_status
        self.body = body
        super().__init__(f"OpenAI API error ({upstream_status}): {body}")


class UpstreamAuthError(UpstreamError):
    message = "Invalid API key configuration"


class UpstreamPermissionError(UpstreamError):
    message = "API access forbidden. Check API key permissions."


class UpstreamRateLimitError(UpstreamError):
    status_code = 429
    message = "API rate limit exceeded. Please try again later."


class UpstreamFormatError(AnalysisError):
    message = "AI returned invalid response format. Please try again."


class UpstreamTransportError(AnalysisError):
    pass


_BY_STATUS = {
    401: UpstreamAuthError,
    403: UpstreamPermissionError,
    429: UpstreamRateLimitError,
}


def upstream_error_for(status: int, body: str) -> UpstreamError:
    return _BY_STATUS.get(status, UpstreamError)(status, body)
