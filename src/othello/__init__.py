"""
Othello engine: board, capture rule, turn orchestration and heuristic agents.
"""

__version__ = "0.1"
