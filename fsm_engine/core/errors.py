"""Error Hierarchy — typed, categorized exceptions for every automaton misuse.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - All automaton errors are local usage errors: raised to the immediate caller,
      never retried, never leave the automaton partially modified
    - to_response() produces the REST envelope used by the HTTP layer

Design Decisions:
    - Single hierarchy with AutomatonError base: one FastAPI handler catches all
    - ErrorContext as dataclass: names the offending state/symbol without
      coupling core/ to the logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Offending inputs, surfaced in the error envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    state_name: str | None = None
    symbol: str | None = None
    debug_info: dict[str, Any] | None = None


class AutomatonError(Exception):
    """Base exception for all automaton errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "state_name": self.context.state_name,
                    "symbol": self.context.symbol,
                },
            }
        }


# ─── Usage Errors (400-level) ───────────────────────────────────

class NullReferenceError(AutomatonError):
    """An operation received None where a state was required."""
    def __init__(self, argument: str, context: ErrorContext | None = None):
        super().__init__(
            f"Expected a state for '{argument}', got None",
            "NULL_REFERENCE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.argument = argument


class NullStateViolationError(AutomatonError):
    """Attempted to alter the null state or reuse its reserved name."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "NULL_STATE_VIOLATION", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )


class InvalidStateError(AutomatonError):
    """State is not a current member of the automaton's registry."""
    def __init__(self, state_name: str | None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.state_name = state_name
        super().__init__(
            f"State '{state_name}' does not belong to this automaton",
            "INVALID_STATE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )


class InvalidSymbolError(AutomatonError):
    """Symbol lies outside the automaton's alphabet."""
    def __init__(self, symbol: Any, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.symbol = str(symbol)
        super().__init__(
            f"Symbol {symbol!r} is not in the alphabet",
            "INVALID_SYMBOL", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.symbol = symbol


class NotReadyError(AutomatonError):
    """run() called before an initial state was designated."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Automaton has no initial state. Call set_init_state first.",
            "NOT_READY", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class MachineConstructionError(AutomatonError):
    """A machine factory refused its parameters."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "MACHINE_CONSTRUCTION_REFUSED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 422,
        )
