"""
Validation — Input validation and error types for the outer layers.

The selector itself never raises; these are used by the settings loader,
the settings checks and the CLI.

## Usage

    from mirror_resolver.validation import validate_absolute_url, ValidationError

    try:
        validate_absolute_url(rule.url, field="url")
    except ValidationError as e:
        print(f"Validation failed: {e}")
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional
from urllib.parse import urlsplit


class ValidationError(Exception):
    """Raised when validation fails."""

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict] = None):
        self.message = message
        self.field = field
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message


class ConfigurationError(Exception):
    """Raised when the settings file is missing or invalid."""
    pass


def validate_file_readable(path: Path, description: str = "File") -> None:
    """Validate that a file exists and is readable."""
    if not path.exists():
        raise ValidationError(f"{description} does not exist: {path}")

    if not path.is_file():
        raise ValidationError(f"{description} is not a file: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            f.read(1)
    except (OSError, UnicodeDecodeError) as e:
        raise ValidationError(f"{description} cannot be read: {e}")


def validate_absolute_url(url: str, field: str = "url") -> str:
    """
    Validate that a URL has a scheme and, unless it is a file URL, a host.

    Returns:
        The URL unchanged

    Raises:
        ValidationError: If the URL is not absolute
    """
    try:
        parts = urlsplit(url)
        parts.port
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"Invalid URL: {url!r}",
            field=field,
            details={"error": str(e)},
        )

    if not parts.scheme:
        raise ValidationError(f"URL has no scheme: {url!r}", field=field)

    if parts.scheme != "file" and not parts.hostname:
        raise ValidationError(f"URL has no host: {url!r}", field=field)

    return url
