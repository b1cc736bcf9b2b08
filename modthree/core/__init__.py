"""
Core modules for modthree.
Centralized exports for the automaton engine and its clients.
"""

from .errors import (
    AutomatonError,
    ConstructionError,
    DefinitionError,
    DuplicateTransition,
    EmptyAlphabet,
    ErrorKind,
    ExecutionError,
    InvalidSymbol,
    NoStates,
    NoTransition,
    StartNotInStates,
    UndefinedState,
    UndefinedSymbol,
)

from .fsm import Automaton, Cursor

from .models import AutomatonDefinition, load_definition

from .modthree import (
    S0,
    S1,
    S2,
    ModThreeError,
    build_mod_three,
    mod_three,
)

from .visualize import to_digraph

__all__ = [
    # Errors
    "AutomatonError",
    "ConstructionError",
    "DefinitionError",
    "DuplicateTransition",
    "EmptyAlphabet",
    "ErrorKind",
    "ExecutionError",
    "InvalidSymbol",
    "NoStates",
    "NoTransition",
    "StartNotInStates",
    "UndefinedState",
    "UndefinedSymbol",
    # Engine
    "Automaton",
    "Cursor",
    # Definitions
    "AutomatonDefinition",
    "load_definition",
    # Mod three
    "S0",
    "S1",
    "S2",
    "ModThreeError",
    "build_mod_three",
    "mod_three",
    # Visualization
    "to_digraph",
]
