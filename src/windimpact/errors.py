"""Error kinds raised while analyzing wind impact on a path."""

from __future__ import annotations


class WindImpactError(Exception):
    """Base class for windimpact errors."""


class EmptyPathError(WindImpactError, ValueError):
    """The path has no segment headings to analyze."""


class InvalidRepresentativeLocation(WindImpactError, ValueError):
    """No representative coordinate could be derived for the path."""


class UpstreamFetchError(WindImpactError):
    """The weather provider request failed or returned unusable data."""
