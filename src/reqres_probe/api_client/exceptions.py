"""
Exceptions raised while reading API responses or using a client.
"""


class ResponseFieldError(KeyError):
    """Raised when a JSON field is absent, null where a value is required, or of the wrong type.

    Keeps "field missing" distinguishable from "field has an unexpected value",
    which is what a plain assertion on the value reports.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(path)

    def __str__(self):
        return f"Response field '{self.path}': {self.reason}"


class ResponseBodyError(ValueError):
    """Raised when a response body cannot be parsed as JSON."""

    def __init__(self, status_code: int, body: str, cause: Exception = None):
        self.status_code = status_code
        self.body = body
        self.cause = cause
        excerpt = body if len(body) <= 200 else body[:200] + '...'
        if not body.strip():
            message = f"Expected a JSON body but the response (status {status_code}) was empty"
        else:
            message = f"Response body (status {status_code}) is not valid JSON: {excerpt!r}"
        super().__init__(message)


class ClientClosedError(RuntimeError):
    """Raised when a request is issued through a client that has been closed."""
    pass
