"""Actionable error hierarchy for slugkit.

Errors are classified by **recovery path**, not by origin.
Each error type carries structured guidance for three audiences:
  - The calling code (typed ``error_type`` for routing)
  - The human operator (``suggestion`` + ``troubleshooting`` steps)
  - An AI agent (``ai_guidance`` with concrete next actions)

The slug transformation itself is total over well-formed text, so these
errors only surface at the edges: option validation, options files, batch
input files and the foreign boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any


# ---------------------------------------------------------------------------
# Error classification
# ---------------------------------------------------------------------------


class ErrorType(StrEnum):
    """Recovery-path categories — what to *do*, not where it came from."""

    CONFIG = "config"
    PARSE = "parse"
    VALIDATION = "validation"
    ENCODING = "encoding"
    INPUT = "input"
    MEMORY = "memory"
    UNEXPECTED = "unexpected"


# ---------------------------------------------------------------------------
# Guidance dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AIGuidance:
    """Machine-readable guidance for an AI agent consuming this error."""

    action_required: str
    command: str | None = None
    checks: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"action_required": self.action_required}
        if self.command is not None:
            result["command"] = self.command
        if self.checks is not None:
            result["checks"] = self.checks
        return result


@dataclass(frozen=True)
class Troubleshooting:
    """Sequential, human-readable recovery steps for the operator."""

    steps: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {"steps": self.steps}


# ---------------------------------------------------------------------------
# Base actionable error
# ---------------------------------------------------------------------------


@dataclass
class ActionableError(Exception):
    """Structured error with embedded recovery guidance.

    Use the factory classmethods rather than constructing directly —
    they encode domain knowledge so callers don't have to.
    """

    error: str
    error_type: ErrorType
    service: str

    success: bool = field(default=False, init=False)
    suggestion: str | None = None
    ai_guidance: AIGuidance | None = None
    troubleshooting: Troubleshooting | None = None
    context: dict[str, Any] | None = None
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def __post_init__(self) -> None:
        super().__init__(self.error)

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Compact JSON-ready dict — ``None`` values are excluded."""
        result: dict[str, Any] = {
            "success": self.success,
            "error": self.error,
            "error_type": self.error_type.value,
            "service": self.service,
            "timestamp": self.timestamp,
        }
        if self.suggestion is not None:
            result["suggestion"] = self.suggestion
        if self.ai_guidance is not None:
            result["ai_guidance"] = self.ai_guidance.to_dict()
        if self.troubleshooting is not None:
            result["troubleshooting"] = self.troubleshooting.to_dict()
        if self.context is not None:
            result["context"] = self.context
        return result

    # -- factory methods -----------------------------------------------------

    @classmethod
    def config(
        cls,
        field_name: str,
        reason: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Missing or invalid entry in a slug options file."""
        return cls(
            error=f"Configuration error — {field_name}: {reason}",
            error_type=ErrorType.CONFIG,
            service="options file",
            suggestion=suggestion or f"Fix '{field_name}' in the options file",
            ai_guidance=AIGuidance(
                action_required=f"Correct the '{field_name}' entry in the options file",
                checks=[
                    "Verify the options file path exists",
                    f"Verify '{field_name}' is a recognised key",
                ],
            ),
            troubleshooting=Troubleshooting(
                steps=[
                    "1. Open the options file",
                    f"2. Locate '{field_name}'",
                    f"3. Fix the issue: {reason}",
                    "4. Save and re-run",
                ]
            ),
        )

    @classmethod
    def parse(
        cls,
        source: str,
        raw_error: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Options file is not valid TOML."""
        return cls(
            error=f"Cannot parse {source}: {raw_error}",
            error_type=ErrorType.PARSE,
            service=source,
            suggestion=suggestion or f"Fix the TOML syntax in {source}",
            ai_guidance=AIGuidance(
                action_required=f"Repair the TOML syntax of {source}",
                checks=[
                    "Look at the line and column reported by the parser",
                    "Check for unquoted strings and unbalanced brackets",
                ],
            ),
        )

    @classmethod
    def validation(
        cls,
        field_name: str,
        reason: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Option value out of range or of the wrong type."""
        return cls(
            error=f"Validation error — {field_name}: {reason}",
            error_type=ErrorType.VALIDATION,
            service="validation",
            suggestion=suggestion or f"Fix '{field_name}': {reason}",
            ai_guidance=AIGuidance(
                action_required=f"Correct the value for '{field_name}'",
            ),
            troubleshooting=Troubleshooting(
                steps=[
                    f"1. Check the value of '{field_name}'",
                    f"2. Issue: {reason}",
                    "3. Correct and retry",
                ]
            ),
        )

    @classmethod
    def encoding(
        cls,
        raw_error: str,
        *,
        service: str = "ffi",
        command: str | None = None,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Input bytes are not UTF-8 (foreign boundary or batch file)."""
        return cls(
            error=f"Input is not valid UTF-8: {raw_error}",
            error_type=ErrorType.ENCODING,
            service=service,
            suggestion=suggestion or "Encode the input text as UTF-8 before calling slugify",
            ai_guidance=AIGuidance(
                action_required="Re-encode the caller's input as UTF-8",
                command=command,
                checks=[
                    "Is the caller passing Latin-1 or UTF-16 data?",
                    "Is the buffer NUL-terminated at the right place?",
                ],
            ),
        )

    @classmethod
    def input_file(
        cls,
        path: str,
        raw_error: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Batch input file is missing or unreadable."""
        return cls(
            error=f"Cannot read {path}: {raw_error}",
            error_type=ErrorType.INPUT,
            service="batch",
            suggestion=suggestion
            or f"Check that {path} exists and is readable, or pipe the titles on stdin",
            ai_guidance=AIGuidance(
                action_required=f"Make {path} readable or pass a different file",
                command=f"ls -l {path}",
                checks=[
                    "Is the path relative to the current working directory?",
                    "Does the current user have read permission?",
                ],
            ),
            context={"path": path},
        )

    @classmethod
    def memory(
        cls,
        address: int,
        reason: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Buffer ownership violated (double free, foreign pointer, use after free)."""
        return cls(
            error=f"Buffer 0x{address:x} {reason}",
            error_type=ErrorType.MEMORY,
            service="ffi",
            suggestion=suggestion
            or "Release each returned buffer exactly once and never read it afterwards",
            ai_guidance=AIGuidance(
                action_required="Audit the caller's buffer lifetime handling",
                checks=[
                    "Is free_string called twice for the same pointer?",
                    "Was the pointer obtained from slugify_simple/slugify_with_options?",
                ],
            ),
            context={"address": address},
        )

    @classmethod
    def unexpected(
        cls,
        service: str,
        operation: str,
        raw_error: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Catch-all for truly unexpected failures."""
        return cls(
            error=f"Unexpected error in {service} during {operation}: {raw_error}",
            error_type=ErrorType.UNEXPECTED,
            service=service,
            suggestion=suggestion or "This is an unexpected error — check logs for details",
            ai_guidance=AIGuidance(
                action_required="Analyze the error and escalate if needed",
                checks=[
                    "Check the full traceback in logs",
                    "Reproduce with the same input text and options",
                ],
            ),
        )

    @classmethod
    def from_exception(
        cls,
        error: Exception,
        service: str,
        operation: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Classify a built-in exception by its type.

        A caller-supplied ``suggestion`` is always preserved — it carries
        context the generic classifier cannot infer.
        """
        raw_error = str(error)

        if isinstance(error, UnicodeError):
            return cls.encoding(raw_error, service=service, suggestion=suggestion)

        if isinstance(error, (ValueError, TypeError)):
            return cls.validation(operation, raw_error, suggestion=suggestion)

        return cls.unexpected(service, operation, raw_error, suggestion=suggestion)
