"""Domain-level exceptions."""


class ValidationConfigError(ValueError):
    """A validation run cannot start: bad base URL, no endpoints, bad limits.

    Raised once before any probe is sent; per-endpoint failures are never
    reported through exceptions.
    """
