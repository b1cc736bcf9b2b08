"""
Deterministic Finite Automaton Engine
Builder for states, alphabet and transitions, plus cursors that walk the
transition table over a sequence of input symbols.
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Generic, Hashable, Iterable, Iterator, List, Mapping, Optional, Set, Tuple, TypeVar

from .errors import (
    DuplicateTransition,
    EmptyAlphabet,
    ExecutionError,
    InvalidSymbol,
    NoStates,
    NoTransition,
    StartNotInStates,
    UndefinedState,
    UndefinedSymbol,
)
from .logging_config import get_logger

log = get_logger(__name__)

StateT = TypeVar("StateT", bound=Hashable)
SymbolT = TypeVar("SymbolT", bound=Hashable)


class Automaton(Generic[StateT, SymbolT]):
    """
    A deterministic finite-state machine.

    Registration order is states and symbols first, then the transitions that
    reference them. The machine owns one default cursor so ``reset``, ``step``,
    ``run`` and ``process`` can be called on it directly; callers that need
    independent runs over the same machine take their own with ``cursor()``.
    """

    def __init__(self, start: StateT):
        self._start = start
        self._states: Set[StateT] = {start}
        self._finals: Set[StateT] = set()
        self._alphabet: Set[SymbolT] = set()
        self._transitions: Dict[StateT, Dict[SymbolT, StateT]] = {}
        self._cursor = Cursor(self)

    # --- Definition ---

    def add_state(self, state: StateT, is_final: bool = False) -> None:
        """Register a state; marking it final is sticky."""
        self._states.add(state)
        if is_final:
            self._finals.add(state)

    def add_symbol(self, symbol: SymbolT) -> None:
        self._alphabet.add(symbol)

    def add_transition(self, source: StateT, symbol: SymbolT, target: StateT) -> None:
        """
        Register delta(source, symbol) = target.

        Raises UndefinedState, UndefinedSymbol or DuplicateTransition. A second
        registration for the same pair is rejected even when the target matches.
        """
        if source not in self._states:
            raise UndefinedState(source, "from")
        if target not in self._states:
            raise UndefinedState(target, "to")
        if symbol not in self._alphabet:
            raise UndefinedSymbol(symbol)

        row = self._transitions.setdefault(source, {})
        if symbol in row:
            raise DuplicateTransition(source, symbol, row[symbol], target)
        row[symbol] = target
        log.debug("transition_added", source=source, symbol=symbol, target=target)

    def validate(self) -> None:
        """Check the machine is runnable. Transition totality is not required."""
        if not self._states:
            raise NoStates()
        if not self._alphabet:
            raise EmptyAlphabet()
        if self._start not in self._states:
            raise StartNotInStates(self._start)
        log.debug("automaton_validated", states=len(self._states), alphabet=len(self._alphabet))

    # --- Introspection ---

    @property
    def start(self) -> StateT:
        return self._start

    @property
    def states(self) -> FrozenSet[StateT]:
        return frozenset(self._states)

    @property
    def finals(self) -> FrozenSet[StateT]:
        return frozenset(self._finals)

    @property
    def alphabet(self) -> FrozenSet[SymbolT]:
        return frozenset(self._alphabet)

    def has_symbol(self, symbol: SymbolT) -> bool:
        return symbol in self._alphabet

    def is_final(self, state: StateT) -> bool:
        return state in self._finals

    def target(self, state: StateT, symbol: SymbolT) -> Optional[StateT]:
        """Registered target of (state, symbol), or None when there is no edge."""
        return self._transitions.get(state, {}).get(symbol)

    def edges(self, state: StateT) -> Mapping[SymbolT, StateT]:
        """Read-only view of the outgoing transitions of ``state``."""
        return MappingProxyType(self._transitions.get(state, {}))

    def transitions(self) -> Iterator[Tuple[StateT, SymbolT, StateT]]:
        for source, row in self._transitions.items():
            for symbol, target in row.items():
                yield source, symbol, target

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self) -> str:
        return (
            f"Automaton(start={self._start!r}, states={len(self._states)}, "
            f"alphabet={len(self._alphabet)}, transitions={sum(1 for _ in self.transitions())})"
        )

    # --- Execution ---

    def cursor(self) -> "Cursor[StateT, SymbolT]":
        """A fresh, independent execution position at the start state."""
        return Cursor(self)

    def reset(self) -> None:
        self._cursor.reset()

    def step(self, symbol: SymbolT, position: int = 0) -> None:
        self._cursor.step(symbol, position)

    def current(self) -> StateT:
        return self._cursor.current

    def accepting(self) -> bool:
        return self._cursor.accepting

    def run(self, sequence: Iterable[SymbolT]) -> StateT:
        return self._cursor.run(sequence)

    def process(self, text: str) -> StateT:
        return self._cursor.process(text)


class Cursor(Generic[StateT, SymbolT]):
    """
    Execution state for one run over an automaton.

    The cursor only reads the automaton, so any number of cursors can share
    one machine as long as nobody keeps registering on it.
    """

    def __init__(self, automaton: Automaton[StateT, SymbolT]):
        self._automaton = automaton
        self._current = automaton.start

    @property
    def automaton(self) -> Automaton[StateT, SymbolT]:
        return self._automaton

    @property
    def current(self) -> StateT:
        return self._current

    @property
    def accepting(self) -> bool:
        return self._automaton.is_final(self._current)

    def reset(self) -> None:
        self._current = self._automaton.start

    def step(self, symbol: SymbolT, position: int = 0) -> None:
        """
        Consume one symbol. ``position`` is only used for error reporting.
        A failed step leaves the cursor where it was.
        """
        if not self._automaton.has_symbol(symbol):
            raise InvalidSymbol(symbol, position)
        edges = self._automaton.edges(self._current)
        if symbol not in edges:
            raise NoTransition(self._current, symbol, position)
        self._current = edges[symbol]

    def run(self, sequence: Iterable[SymbolT]) -> StateT:
        """
        Validate, reset, then step through ``sequence`` from position 0.
        Stops at the first failing symbol.
        """
        self._automaton.validate()
        self.reset()
        consumed = 0
        try:
            for position, symbol in enumerate(sequence):
                self.step(symbol, position)
                consumed += 1
        except ExecutionError as e:
            log.debug("run_failed", consumed=consumed, **e.to_dict())
            raise
        log.debug("run_completed", final_state=self._current, consumed=consumed, accepting=self.accepting)
        return self._current

    def process(self, text: str) -> StateT:
        """Run over the characters of ``text`` with outer whitespace stripped."""
        return self.run(list(text.strip()))

    def trace(self, sequence: Iterable[SymbolT]) -> List[StateT]:
        """Like run, but returns every state visited, start included."""
        self._automaton.validate()
        self.reset()
        path = [self._current]
        for position, symbol in enumerate(sequence):
            self.step(symbol, position)
            path.append(self._current)
        return path
