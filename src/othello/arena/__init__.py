"""
Arena module for running matches between agents.
"""
from .arena import Arena
from .orchestrator import MatchResult, MatchState, MatchStats, TurnOrchestrator

__all__ = ['Arena', 'MatchResult', 'MatchState', 'MatchStats', 'TurnOrchestrator']
