class FetchError(Exception):
    """A TBA lookup failed. `description` is safe to show to users."""

    description = "Error fetching TBA data"


class RequestBuildError(FetchError):
    description = "Error creating TBA request"


class FetchTransportError(FetchError):
    description = "Error fetching TBA data"


class BodyReadError(FetchError):
    description = "Error reading TBA response body"


class StatusCodeError(FetchError):
    def __init__(self, status_code: int, body: str):
        super().__init__(f"TBA returned status {status_code}")
        self.status_code = status_code
        self.body = body

    @property
    def description(self) -> str:
        return f"Error: received non-200 status code from TBA ({self.status_code})"


class DecodeError(FetchError):
    description = "Error parsing TBA response"
