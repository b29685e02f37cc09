"""Custom exception hierarchy for scriptpad with helpful error messages."""

from __future__ import annotations

from typing import Any


class ScriptpadError(Exception):
    """Base exception with helpful formatting for all scriptpad errors.

    Provides structured error messages with hints and details to help users
    understand and fix problems.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception with structured error information.

        Args:
            message: Primary error message describing what went wrong
            hint: Optional hint suggesting how to fix the problem
            details: Optional dictionary with additional debugging information
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Format the error message with hint and details.

        Returns:
            Formatted error string with all available information
        """
        output = f"Error: {self.message}"
        if self.hint:
            output += f"\nHint: {self.hint}"
        if self.details:
            details_str = "\n".join(
                f"  {key}: {value}" for key, value in self.details.items()
            )
            output += f"\nDetails:\n{details_str}"
        return output


class ConfigurationError(ScriptpadError):
    """Configuration errors including invalid settings and missing config files."""

    pass


class DocumentError(ScriptpadError):
    """Malformed stored screenplay or block documents."""

    pass


class SceneNotFoundError(ScriptpadError):
    """A scene id that is not part of the screenplay."""

    def __init__(self, scene_id: str, known_ids: list[str] | None = None) -> None:
        """Initialize with the missing scene id.

        Args:
            scene_id: Identifier that was looked up
            known_ids: Scene ids the screenplay does contain
        """
        self.scene_id = scene_id
        details: dict[str, Any] = {"scene_id": scene_id}
        if known_ids is not None:
            details["known_scenes"] = known_ids
        super().__init__(
            message=f"Scene '{scene_id}' not found",
            hint="Add the scene first or pick one of the known scene ids",
            details=details,
        )


class EditorStateError(ScriptpadError):
    """Editor session calls made out of order."""

    pass


def check_config_keys(config: dict[str, Any]) -> None:
    """Check for common configuration mistakes.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigurationError: With hints about correct configuration keys
    """
    wrong_keys = {
        "line_height": "editor_line_height",
        "viewport_height": "editor_viewport_height",
        "level": "log_level",
    }

    for wrong, correct in wrong_keys.items():
        if wrong in config:
            raise ConfigurationError(
                message=f"Invalid configuration key '{wrong}'",
                hint=f"Use '{correct}' instead of '{wrong}'",
                details={
                    "found_keys": list(config.keys()),
                    "invalid_key": wrong,
                    "correct_key": correct,
                },
            )
