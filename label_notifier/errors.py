from __future__ import annotations


class NotifierError(Exception):
    pass


class ConfigError(NotifierError):
    pass


class ParseError(NotifierError):
    pass


class StorageWriteError(NotifierError):
    pass


class RemoteAPIError(NotifierError):
    """Non-success answer (or no answer at all) from a remote service."""

    def __init__(self, service: str, status_code: int | None, body: str = ""):
        self.service = service
        self.status_code = status_code
        self.body = body
        if status_code is None:
            message = f"{service} request failed: {body}"
        else:
            message = f"{service} returned status {status_code}: {body}"
        super().__init__(message)
