# src/confpatterns/infrastructure/persistence/exceptions.py
class PersistenceError(Exception):
    """Base exception for persistence-related errors."""
    pass


class SettingsFileError(PersistenceError, OSError):
    """Raised when a settings file cannot be read or written."""
    def __init__(self, path: str, operation: str, reason: str = ""):
        message = f"Could not {operation} settings file '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.path = path
        self.operation = operation
