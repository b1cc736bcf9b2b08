from modthree.core.modthree import build_mod_three
from modthree.core.fsm import Automaton
from modthree.core.visualize import to_digraph


def test_digraph_lists_states_and_edges():
    dot = to_digraph(build_mod_three(), name="mod3")
    src = dot.source
    assert "rankdir=LR" in src
    assert "start_ptr -> S0" in src
    assert src.count("doublecircle") == 3
    assert "S1 -> S2 [label=0]" in src


def test_non_final_states_are_circles():
    m = Automaton("A")
    m.add_state("B", True)
    m.add_symbol("x")
    m.add_transition("A", "x", "B")
    src = to_digraph(m).source
    assert "A [label=A shape=circle]" in src
    assert "B [label=B shape=doublecircle]" in src


def test_exported_from_core():
    from modthree.core import to_digraph as exported
    assert exported is to_digraph
