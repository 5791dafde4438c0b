"""Custom exceptions for the analysis context."""

from pathlib import Path
from typing import Optional


class TemplateConfigurationError(Exception):
    """
    Exception raised when the subtask template registry is malformed.

    Raised once, while the registry is built, so that synthesis itself never
    has to handle a missing template.

    Attributes:
        message: Error description
        family_id: Template family that failed validation, if any
    """

    def __init__(self, message: str, family_id: Optional[str] = None):
        self.message = message
        self.family_id = family_id

        parts = [message]
        if family_id:
            parts.append(f"Template family: {family_id}")

        super().__init__("\n".join(parts))


class ScoringConfigError(ValueError):
    """
    Exception raised when a scoring override file does not fit the ScoringConfig schema.

    Attributes:
        message: Error description
        config_path: Override file that was being merged
        original_error: The underlying OmegaConf error
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.original_error = original_error

        parts = [message]
        if config_path:
            parts.append(f"Config file: {config_path}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
