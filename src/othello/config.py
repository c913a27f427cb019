"""
Configuration parameters for the Othello engine.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json


@dataclass
class MatchConfig:
    """Configuration for running matches."""
    move_timeout: float = 2.0  # Seconds to wait for an agent's move
    move_delay: float = 0.0  # Pause after each played turn, to watch play
    max_turns: int = 200  # Safety valve against stalled matches
    num_games: int = 1
    log_every_n_games: int = 10

    def __post_init__(self):
        if self.move_timeout <= 0:
            raise ValueError("move_timeout must be positive")
        if self.move_delay < 0:
            raise ValueError("move_delay must not be negative")
        if self.max_turns <= 0:
            raise ValueError("max_turns must be positive")


@dataclass
class AgentConfig:
    """Which agent plays each side."""
    player1: str = "corner_edge"
    player2: str = "greedy"


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False
    use_tensorboard: bool = False


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello-Engine"
    seed: Optional[int] = 42
    match: MatchConfig = field(default_factory=MatchConfig)
    agents: AgentConfig = field(default_factory=AgentConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello-Engine'),
            seed=config_dict.get('seed', 42),
            match=MatchConfig(**config_dict.get('match', {})),
            agents=AgentConfig(**config_dict.get('agents', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
