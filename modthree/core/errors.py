"""
Error Module for the modthree automaton engine.
Typed exceptions carrying the offending state, symbol and position.
"""

from enum import Enum
from typing import Any, Hashable, Optional


class ErrorKind(str, Enum):
    """Every failure the engine can report."""
    UNDEFINED_STATE = "UNDEFINED_STATE"
    UNDEFINED_SYMBOL = "UNDEFINED_SYMBOL"
    DUPLICATE_TRANSITION = "DUPLICATE_TRANSITION"
    NO_STATES = "NO_STATES"
    EMPTY_ALPHABET = "EMPTY_ALPHABET"
    START_NOT_IN_STATES = "START_NOT_IN_STATES"
    INVALID_SYMBOL = "INVALID_SYMBOL"
    NO_TRANSITION = "NO_TRANSITION"


class AutomatonError(Exception):
    """Base class for all engine errors."""
    kind: ErrorKind

    def to_dict(self) -> dict:
        """Kind plus payload, for structured logs."""
        data = {"kind": self.kind.value}
        data.update(self._payload())
        return data

    def _payload(self) -> dict:
        return {}


# ---------------------------------------------------------------------------
# Construction errors
# ---------------------------------------------------------------------------
class ConstructionError(AutomatonError):
    """A registration call referenced something invalid."""


class UndefinedState(ConstructionError):
    kind = ErrorKind.UNDEFINED_STATE

    def __init__(self, state: Hashable, role: str):
        self.state = state
        self.role = role
        super().__init__(f"{role}-state {state!r} not defined")

    def _payload(self) -> dict:
        return {"state": self.state, "role": self.role}


class UndefinedSymbol(ConstructionError):
    kind = ErrorKind.UNDEFINED_SYMBOL

    def __init__(self, symbol: Hashable):
        self.symbol = symbol
        super().__init__(f"symbol {symbol!r} not in alphabet")

    def _payload(self) -> dict:
        return {"symbol": self.symbol}


class DuplicateTransition(ConstructionError):
    kind = ErrorKind.DUPLICATE_TRANSITION

    def __init__(self, state: Hashable, symbol: Hashable, existing: Hashable, requested: Hashable):
        self.state = state
        self.symbol = symbol
        self.existing = existing
        self.requested = requested
        super().__init__(
            f"transition already defined for ({state!r}, {symbol!r}) -> {existing!r}"
        )

    def _payload(self) -> dict:
        return {
            "state": self.state,
            "symbol": self.symbol,
            "existing": self.existing,
            "requested": self.requested,
        }


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------
class DefinitionError(AutomatonError):
    """The automaton is structurally incomplete and cannot run."""


class NoStates(DefinitionError):
    kind = ErrorKind.NO_STATES

    def __init__(self):
        super().__init__("no states defined")


class EmptyAlphabet(DefinitionError):
    kind = ErrorKind.EMPTY_ALPHABET

    def __init__(self):
        super().__init__("alphabet is empty")


class StartNotInStates(DefinitionError):
    kind = ErrorKind.START_NOT_IN_STATES

    def __init__(self, start: Hashable):
        self.start = start
        super().__init__(f"start state {start!r} not in states set")

    def _payload(self) -> dict:
        return {"start": self.start}


# ---------------------------------------------------------------------------
# Execution errors
# ---------------------------------------------------------------------------
class ExecutionError(AutomatonError):
    """A run broke down on a particular input symbol."""
    symbol: Any
    position: Optional[int]


class InvalidSymbol(ExecutionError):
    kind = ErrorKind.INVALID_SYMBOL

    def __init__(self, symbol: Hashable, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"invalid symbol {symbol!r} at position {position}")

    def _payload(self) -> dict:
        return {"symbol": self.symbol, "position": self.position}


class NoTransition(ExecutionError):
    kind = ErrorKind.NO_TRANSITION

    def __init__(self, state: Hashable, symbol: Hashable, position: int):
        self.state = state
        self.symbol = symbol
        self.position = position
        super().__init__(f"no transition from {state!r} on {symbol!r} at position {position}")

    def _payload(self) -> dict:
        return {"state": self.state, "symbol": self.symbol, "position": self.position}
