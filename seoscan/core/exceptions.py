"""
Analyzer exceptions for SEOscan.

Only errors raised while validating the input URL or fetching the primary
page surface to the caller. Discovery failures are recovered in place.
"""


class AnalyzerError(Exception):
    """Base error for a failed analysis request."""

    default_message = "Analyze failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidUrlError(AnalyzerError):
    """Input could not be parsed as an absolute http(s) URL."""

    default_message = "Invalid URL"


class BlockedUrlError(AnalyzerError):
    """Target host is a private, loopback or link-local address."""

    default_message = "Blocked URL (private or local address)"


class FetchError(AnalyzerError):
    """The primary page could not be retrieved."""

    default_message = "Failed to fetch page"


class FetchTimeoutError(FetchError):
    default_message = "Request timeout - website took too long to respond"


class PageNotFoundError(FetchError):
    default_message = "Page not found (404)"


class AccessForbiddenError(FetchError):
    default_message = "Access forbidden (403)"


class ServerError(FetchError):
    default_message = "Server error (500)"


class ClientError(FetchError):
    default_message = "Client error"


class HttpStatusError(FetchError):
    default_message = "HTTP error"


class NotHtmlError(FetchError):
    default_message = "Response is not HTML"


class ResponseTooLargeError(FetchError):
    default_message = "HTML response too large"


class EmptyBodyError(FetchError):
    default_message = "Empty response body"


def error_for_status(status_code: int) -> FetchError:
    """Map a non-2xx status code to its fetch error."""
    if status_code == 404:
        return PageNotFoundError()
    if status_code == 403:
        return AccessForbiddenError()
    if status_code == 500:
        return ServerError()
    if 400 <= status_code < 500:
        return ClientError(f"Client error ({status_code})")
    if status_code >= 500:
        return ServerError(f"Server error ({status_code})")
    return HttpStatusError(f"HTTP error ({status_code})")
