import sys
import os

import pytest

# Ensure the repository root is importable when running from a checkout
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from modthree.core.fsm import Automaton


@pytest.fixture
def mod_three_machine():
    """S0/S1/S2 over {'0','1'}, all final, start S0."""
    m = Automaton("S0")
    for s in ("S0", "S1", "S2"):
        m.add_state(s, True)
    m.add_symbol("0")
    m.add_symbol("1")
    m.add_transition("S0", "0", "S0")
    m.add_transition("S0", "1", "S1")
    m.add_transition("S1", "0", "S2")
    m.add_transition("S1", "1", "S0")
    m.add_transition("S2", "0", "S1")
    m.add_transition("S2", "1", "S2")
    return m
