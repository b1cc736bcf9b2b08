from graphviz import Digraph

from .fsm import Automaton


def to_digraph(automaton: Automaton, name: str = "automaton") -> Digraph:
    """Graphviz view of the machine; rendering to a file is left to the caller."""
    dot = Digraph(name=name, comment='DFA Visualization')
    dot.attr(rankdir='LR')

    # Start Pointer
    dot.node('start_ptr', '', shape='none')
    dot.edge('start_ptr', str(automaton.start))

    for state in sorted(automaton.states, key=str):
        shape = 'doublecircle' if automaton.is_final(state) else 'circle'
        dot.node(str(state), str(state), shape=shape)

    for source, symbol, target in automaton.transitions():
        dot.edge(str(source), str(target), label=str(symbol))

    return dot
