"""Exceptions raised by the rest-skills clients and CLIs."""


class RestSkillsError(Exception):
    """Base class for all terminal errors reported by the CLIs."""


class ConfigurationError(RestSkillsError):
    """Raised when credentials, arguments or input content are missing."""


class RemoteError(RestSkillsError):
    """Raised when the remote API answers with a status code >= 400.

    Also used for transport failures, in which case ``status_code`` is None.
    """

    def __init__(
        self,
        method: str,
        endpoint: str,
        status_code: int | None = None,
        message: str | None = None,
    ) -> None:
        self.method = method
        self.endpoint = endpoint
        self.status_code = status_code
        self.message = message or "Unknown error"
        super().__init__(self.summary)

    @property
    def summary(self) -> str:
        """Header line naming the status and the failed endpoint."""
        if self.status_code is None:
            return f"request failed - {self.method} {self.endpoint}"
        return f"HTTP {self.status_code} - {self.method} {self.endpoint}"
