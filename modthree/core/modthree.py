from functools import lru_cache

from .errors import AutomatonError
from .fsm import Automaton
from .logging_config import get_logger

log = get_logger(__name__)

# S0, S1, S2 represent remainders 0, 1 and 2 when dividing by 3.
S0 = "S0"
S1 = "S1"
S2 = "S2"

REMAINDERS = {S0: 0, S1: 1, S2: 2}


class ModThreeError(ValueError):
    """Raised when a binary string cannot be reduced mod 3."""


def build_mod_three() -> Automaton[str, str]:
    """
    Automaton computing a binary string's remainder mod 3.
    Input is read most significant bit first over the alphabet {0, 1}.
    """
    m: Automaton[str, str] = Automaton(S0)

    m.add_state(S0, True)
    m.add_state(S1, True)
    m.add_state(S2, True)

    m.add_symbol('0')
    m.add_symbol('1')

    # next = (2 * r + bit) % 3
    m.add_transition(S0, '0', S0)
    m.add_transition(S0, '1', S1)
    m.add_transition(S1, '0', S2)
    m.add_transition(S1, '1', S0)
    m.add_transition(S2, '0', S1)
    m.add_transition(S2, '1', S2)

    m.validate()
    return m


@lru_cache(maxsize=1)
def shared_machine() -> Automaton[str, str]:
    """One definition for every call; each call runs on its own cursor."""
    return build_mod_three()


def mod_three(text: str) -> int:
    """Remainder (0, 1 or 2) of a binary string. Surrounding whitespace is ignored."""
    text = text.strip()
    try:
        final = shared_machine().cursor().process(text)
    except AutomatonError as e:
        raise ModThreeError(f"invalid binary input: {e}") from e

    if final not in REMAINDERS:
        raise ModThreeError(f"unknown final state: {final}")
    result = REMAINDERS[final]
    log.info("mod_three_computed", input_length=len(text), remainder=result)
    return result
