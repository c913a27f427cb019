"""
Script for playing Othello matches between agents.
"""
import os
import argparse
import sys
from dataclasses import asdict
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.agents import AGENT_NAMES, ConsoleAgent, create_agent
from othello.config import Config, MatchConfig, get_default_config
from othello.logger import setup_logger
from othello.arena import Arena

HUMAN_TIMEOUT = 600.0


def build_config(args) -> Config:
    """Load the config file and apply command-line overrides."""
    if args.config and os.path.exists(args.config):
        print(f"Loading configuration from {args.config}")
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.games is not None:
        config.match.num_games = args.games
    if args.player1 is not None:
        config.agents.player1 = args.player1
    if args.player2 is not None:
        config.agents.player2 = args.player2
    if args.seed is not None:
        config.seed = args.seed

    match = asdict(config.match)
    if args.timeout is not None:
        match['move_timeout'] = args.timeout
    elif ConsoleAgent.name in (config.agents.player1, config.agents.player2):
        match['move_timeout'] = max(match['move_timeout'], HUMAN_TIMEOUT)
    if args.delay is not None:
        match['move_delay'] = args.delay
    if args.max_turns is not None:
        match['max_turns'] = args.max_turns
    # Rebuild so the overrides go through MatchConfig validation
    config.match = MatchConfig(**match)

    if args.log_to_file:
        config.logging.log_to_file = True
    if args.tensorboard:
        config.logging.use_tensorboard = True
    return config


def main():
    parser = argparse.ArgumentParser(description='Play Othello matches between agents')

    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')

    # Players
    parser.add_argument('--player1', type=str, choices=AGENT_NAMES, default=None,
                        help='Agent moving first')
    parser.add_argument('--player2', type=str, choices=AGENT_NAMES, default=None,
                        help='Agent moving second')
    parser.add_argument('--seed', type=int, default=None,
                        help='Tie-break seed for the bots')

    # Match parameters
    parser.add_argument('--games', type=int, default=None,
                        help='Number of matches to play')
    parser.add_argument('--timeout', type=float, default=None,
                        help='Seconds to wait for each move')
    parser.add_argument('--delay', type=float, default=None,
                        help='Pause in seconds after each move')
    parser.add_argument('--max-turns', type=int, default=None,
                        help='Force the match to end after this many turns')

    # Output
    parser.add_argument('--show-board', action='store_true',
                        help='Print the board after every move')
    parser.add_argument('--log-to-file', action='store_true',
                        help='Write logs to a run directory')
    parser.add_argument('--tensorboard', action='store_true',
                        help='Record win rates to TensorBoard')

    args = parser.parse_args()
    try:
        config = build_config(args)
    except ValueError as e:
        parser.error(str(e))
    logger = setup_logger(config)

    seed = config.seed
    player1 = create_agent(config.agents.player1, seed=seed)
    player2 = create_agent(config.agents.player2, seed=None if seed is None else seed + 1)

    arena = Arena(config, logger=logger)
    if args.show_board:
        def show(index, player):
            print(f"\nPlayer {player} plays {index}")
            print(arena.game)
        arena.game.subscribe(show)

    humans = ConsoleAgent.name in (config.agents.player1, config.agents.player2)
    print(f"Starting {config.match.num_games} game(s): "
          f"{config.agents.player1} (X) vs {config.agents.player2} (O)")
    try:
        arena.run_matches(player1, player2, show_progress=not humans and not args.show_board)
    except KeyboardInterrupt:
        print("\nInterrupted.")
    finally:
        arena.print_summary(f"P1 {config.agents.player1}", f"P2 {config.agents.player2}")
        logger.close()


if __name__ == '__main__':
    main()
