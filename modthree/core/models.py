import json
from pathlib import Path
from typing import Dict, List, Union

import yaml
from pydantic import BaseModel, Field, model_validator

from .fsm import Automaton
from .logging_config import get_logger

log = get_logger(__name__)


class AutomatonDefinition(BaseModel):
    """Serializable description of a string-labelled automaton."""
    description: str = Field(default="", description="Free-form note about what the machine recognizes.")
    states: List[str]
    alphabet: List[str]
    transitions: Dict[str, Dict[str, str]] = Field(default_factory=dict)
    start_state: str
    accept_states: List[str] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_integrity(self):
        if not self.states:
            raise ValueError("Empty state list")
        if self.start_state not in self.states:
            raise ValueError(f"Start state {self.start_state!r} is not listed in states")
        unknown = [s for s in self.accept_states if s not in self.states]
        if unknown:
            raise ValueError(f"Accept states not listed in states: {unknown}")
        return self

    def build(self) -> Automaton[str, str]:
        """
        Register everything on a fresh automaton and validate it.
        Dangling transition references raise the engine's construction errors.
        """
        automaton: Automaton[str, str] = Automaton(self.start_state)
        finals = set(self.accept_states)
        for state in self.states:
            automaton.add_state(state, state in finals)
        for symbol in self.alphabet:
            automaton.add_symbol(symbol)
        for source, row in self.transitions.items():
            for symbol, target in row.items():
                automaton.add_transition(source, symbol, target)
        automaton.validate()
        return automaton

    @classmethod
    def from_automaton(cls, automaton: Automaton, description: str = "") -> 'AutomatonDefinition':
        transitions: Dict[str, Dict[str, str]] = {}
        for source, symbol, target in automaton.transitions():
            transitions.setdefault(str(source), {})[str(symbol)] = str(target)
        return cls(
            description=description,
            states=sorted(str(s) for s in automaton.states),
            alphabet=sorted(str(a) for a in automaton.alphabet),
            transitions={k: dict(sorted(v.items())) for k, v in sorted(transitions.items())},
            start_state=str(automaton.start),
            accept_states=sorted(str(s) for s in automaton.finals),
        )


def load_definition(path: Union[str, Path]) -> AutomatonDefinition:
    """Read a definition from a .json, .yaml or .yml file."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)
    definition = AutomatonDefinition.model_validate(data)
    log.info("definition_loaded", path=str(path), states=len(definition.states))
    return definition
