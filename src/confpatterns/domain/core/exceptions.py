# src/confpatterns/domain/core/exceptions.py
from typing import Any, Optional, List


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class SettingNotFoundError(DomainException, KeyError):
    """Raised when a requested setting is not present in the store."""
    def __init__(self, key: str):
        super().__init__(f"Setting '{key}' not found")
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class OrderValidationError(ValidationError):
    """Raised when an order or product carries an invalid amount."""
    def __init__(self, field_name: str, value: float):
        super().__init__(f"{field_name} must not be negative, got {value}",
                         {field_name: value})
        self.field_name = field_name
        self.value = value


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
