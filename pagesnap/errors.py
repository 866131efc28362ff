class PagesnapError(Exception):
    """Base class for everything pagesnap raises on purpose."""


class UsageError(PagesnapError):
    """The command line could not be turned into a capture request.

    `exit_code` is 0 for the bare help case (no arguments at all) and 1 for
    everything else.
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class CaptureError(PagesnapError):
    """The browser failed to launch, navigate or render the page."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to capture {url}: {reason}")
        self.url = url
        self.reason = reason
