from __future__ import annotations

from dataclasses import dataclass


@dataclass
class InvalidExtractedDataError(Exception):
    """Raised when a reader says the extracted data cannot be interpreted.

    The caller should show a "could not interpret this page" message and
    stop rather than build a citation from partial data.
    """

    site: str
    reason: str = "the extracted data is missing required fields"

    def __str__(self) -> str:  # pragma: no cover - human readable
        return f"Could not interpret this {self.site} page: {self.reason}"


@dataclass
class UnknownSiteError(Exception):
    """Raised when no reader or citation builder is registered for a site."""

    site: str

    def __str__(self) -> str:  # pragma: no cover - human readable
        return f"No reader registered for site {self.site!r}"


@dataclass
class RequiredDataUnavailableError(Exception):
    """Raised when prefetched data that an action cannot do without never arrived."""

    what: str
    attempts: int = 0

    def __str__(self) -> str:  # pragma: no cover - human readable
        base = f"Could not retrieve the {self.what}"
        if self.attempts:
            base += f" after {self.attempts} attempts"
        return base
