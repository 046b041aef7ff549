"""Errors raised while parsing HTTP input, before any use case runs."""


class InterfaceError(Exception):
    pass


class MissingParameterError(InterfaceError):
    """Required query parameter absent; rendered as a 400 envelope."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
