#------------------------------------------------------------
#                          errors.py
#        Defines errors raised while fetching events.

class FetchError(RuntimeError):
    """Base class for failures that end the run; the message is shown to the user."""

class NetworkError(FetchError):

    @classmethod
    def transport(cls, reason: object) -> "NetworkError":
        return cls(f"request failed: {reason}")

class RequestTimeoutError(NetworkError):

    @classmethod
    def deadline_exceeded(cls, timeout_seconds: float) -> "RequestTimeoutError":
        return cls(f"request timed out after {timeout_seconds:g} seconds")

class UserNotFoundError(FetchError):

    def __init__(self, message: str, username: str = "") -> None:
        self.username = username
        super().__init__(message)

    @classmethod
    def for_username(cls, username: str) -> "UserNotFoundError":
        return cls(f"user {username} not found", username=username)

class RateLimitError(FetchError):

    @classmethod
    def exceeded(cls) -> "RateLimitError":
        return cls("API rate limit exceeded")

class UnexpectedStatusError(FetchError):

    def __init__(self, message: str, status_code: int = 0) -> None:
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def for_status(cls, status_code: int) -> "UnexpectedStatusError":
        return cls(f"API request failed with status code: {status_code}", status_code=status_code)

class BodyReadError(FetchError):

    @classmethod
    def from_reason(cls, reason: object) -> "BodyReadError":
        return cls(f"failed to read response body: {reason}")

class DecodeError(FetchError):

    @classmethod
    def from_reason(cls, reason: object) -> "DecodeError":
        return cls(f"failed to decode events: {reason}")
