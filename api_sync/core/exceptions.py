"""Custom exception classes for the application."""

from typing import Any


class ApiSyncError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# Model list / mapping input errors
class ModelListFormatError(ApiSyncError):
    """A model name list could not be read or parsed."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(
            f"Invalid model list in {source}: {message}",
            details={"source": source},
        )


class ModelMappingFormatError(ApiSyncError):
    """A serialized model_mapping value is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid model mapping: {message}")
