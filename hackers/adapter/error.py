"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class ScraperError(AdapterError):
    """A Hacker News page did not have the expected structure."""

    pass
