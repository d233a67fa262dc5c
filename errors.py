"""Error types shared by the projection engine, growth analytics and providers."""

from __future__ import annotations


class RentBuyError(Exception):
    """Base class for every error raised by this project."""


class InvalidInput(RentBuyError, ValueError):
    """Scenario inputs violate their invariants."""


class InsufficientData(RentBuyError, ValueError):
    """A price series is too short to derive growth scenarios."""


class DomainError(RentBuyError, ValueError):
    """A computation was asked for outside its mathematical domain."""


class ConfigurationError(RentBuyError, ValueError):
    """Configuration or call options cannot be honoured."""


class ProviderError(RentBuyError, RuntimeError):
    """Historical price data could not be fetched or parsed."""
