class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class NotFoundError(DomainError):
    """Raised when a user, record or notification does not exist."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class InvalidOrExpiredCodeError(AuthenticationError):
    """Raised when a 2FA code is wrong, expired, already used or never issued."""


class OutsideAllowedAreaError(DomainError):
    """Raised when a reported position lies outside the office geofence."""

    def __init__(self, distance_m: float, radius_m: float):
        super().__init__(f"Outside allowed area ({distance_m:.1f} m > {radius_m:.1f} m)")
        self.distance_m = distance_m
        self.radius_m = radius_m


class InfrastructureError(Exception):
    """Base exception for faults that are not attributable to the caller."""


class DeliveryError(InfrastructureError):
    """Raised when an email could not be delivered."""


class ConfigurationError(InfrastructureError):
    """Raised when required runtime configuration is missing."""


class OfficeNotConfiguredError(ConfigurationError):
    """Raised when the primary office location row does not exist."""
