"""Colored workflow logger — ANSI-colored console logging for the record lifecycle.

Provides a WorkflowLogger with color-coded output per workflow stage,
making it easy to follow a submission or an admin edit in the terminal.

Color scheme:
    Green   — Submit / Store
    Yellow  — Validation
    Cyan    — Attachment handling
    Blue    — Session / auth checks
    Magenta — Delete
    Red     — Errors
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


# ── Workflow Stage Definitions ───────────────────────────────────────

class WorkflowStage:
    """Predefined workflow stages as (label, color) pairs."""

    SUBMIT = ("SUBMIT", _Colors.GREEN)
    VALIDATE = ("VALIDATE", _Colors.YELLOW)
    ATTACH = ("ATTACH", _Colors.CYAN)
    STORE = ("STORE", _Colors.GREEN)
    AUTH = ("AUTH", _Colors.BLUE)
    DELETE = ("DELETE", _Colors.MAGENTA)
    ERROR = ("ERROR", _Colors.RED)


def _format_details(kwargs: dict[str, Any]) -> str:
    if not kwargs:
        return ""
    details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
    return f" {_Colors.GRAY}({details}){_Colors.RESET}"


# ── WorkflowLogger ───────────────────────────────────────────────────

class WorkflowLogger:
    """Color-coded logger for record workflow steps.

    Usage:
        log = WorkflowLogger("RequestWorkflowService")
        log.step(WorkflowStage.VALIDATE, "Form rejected", errors=2)
        with log.timed_step(WorkflowStage.STORE, "Creating record"):
            await repository.create(record)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step(self, stage: tuple[str, str], message: str, **kwargs: Any) -> None:
        label, color = stage
        self._logger.info(
            f"{color}{_Colors.BOLD}[{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}" + _format_details(kwargs)
        )

    def step_error(self, stage: tuple[str, str], message: str, error: Exception | None = None) -> None:
        label, _ = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}[{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(formatted)

    @contextmanager
    def timed_step(self, stage: tuple[str, str], message: str, **kwargs: Any):
        """Context manager that logs the step with elapsed time, or the failure."""
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(stage, f"{message} — failed after {elapsed:.3f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.step(stage, f"{message} — {elapsed:.3f}s", **kwargs)
