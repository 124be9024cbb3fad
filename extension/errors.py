# errors.py
"""Errors raised across the extension surfaces. Each message is shown to the user as-is."""


class RelayError(Exception):
    """The backend answered, but not with a successful analysis."""


class TransportError(RelayError):
    """The backend could not be reached at all."""


class ReceivingEndMissing(Exception):
    """No listener is registered for the message target yet.

    The only messaging failure that is worth retrying.
    """


class ExtensionDisconnected(Exception):
    def __init__(self, message: str = "Extension background script disconnected. Please reload the extension and try again."):
        super().__init__(message)


class AnalysisFailed(Exception):
    pass


class UnsupportedPage(AnalysisFailed):
    pass
