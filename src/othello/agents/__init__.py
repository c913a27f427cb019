"""
Agents that decide moves for one side of a match.
"""
from typing import Optional

from .base import Agent, PASS
from .external import ExternalAgent
from .heuristic import HeuristicAgent, Strategy, choose_move
from .human import ConsoleAgent

AGENT_NAMES = [s.value for s in Strategy] + [ConsoleAgent.name]


def create_agent(name: str, seed: Optional[int] = None) -> Agent:
    """
    Build an agent from its short name.

    Args:
        name: One of ``random``, ``greedy``, ``corner_edge`` or ``human``
        seed: Tie-break seed for heuristic bots
    """
    if name == ConsoleAgent.name:
        return ConsoleAgent()
    try:
        strategy = Strategy(name)
    except ValueError:
        raise ValueError(f"Unknown agent '{name}', expected one of {AGENT_NAMES}") from None
    return HeuristicAgent(strategy, seed=seed)


__all__ = [
    'Agent', 'PASS', 'ExternalAgent', 'HeuristicAgent', 'Strategy',
    'choose_move', 'ConsoleAgent', 'AGENT_NAMES', 'create_agent',
]
