"""Error kinds raised by the explorer."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """A user-supplied value is outside the accepted domain.

    Raised before any state change, so the caller can report it and
    carry on with the previous state.
    """


class FetchError(RuntimeError):
    """The remote source could not deliver a page.

    Covers transport failures, non-2xx responses and malformed payloads.
    """

    def __init__(self, message: str, page_number: int | None = None) -> None:
        super().__init__(message)
        self.page_number = page_number


class StaleResponse(Exception):
    """A page arrived for a request that is no longer the current one."""

    def __init__(self, page_number: int, current_page_number: int) -> None:
        super().__init__(
            f"Discarding page {page_number}: page {current_page_number} "
            f"is now requested."
        )
        self.page_number = page_number
        self.current_page_number = current_page_number
