"""
Custom exceptions for the LLM client layer.

Every failure of an inference call is an InferenceError. Subclasses name the
cause for log readability, but callers never branch on them: a failed call
means the line is reported and skipped.
"""


class InferenceError(Exception):
    """
    Base exception for all inference failures.

    Carries a human-readable message plus a free-form details dict for
    structured logging.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InferenceConnectionError(InferenceError):
    """
    Raised when unable to reach the inference server.

    Includes connection refused, DNS failures and other transport errors.
    """
    pass


class InferenceTimeoutError(InferenceConnectionError):
    """
    Raised when the request exceeds the client timeout.
    """
    pass


class InferenceStatusError(InferenceError):
    """
    Raised when the server answers with a non-success HTTP status.

    Examples:
    - Model not pulled (404)
    - Out of memory / server error (500)
    """
    pass


class InferenceResponseError(InferenceError):
    """
    Raised when the server's reply cannot be decoded.

    Covers invalid JSON and bodies without a string ``response`` field.
    """
    pass
