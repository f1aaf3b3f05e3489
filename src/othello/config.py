"""
Configuration parameters for the Othello engine and its presentation pacing.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json


@dataclass
class AnimationConfig:
    """Presentation timing, in seconds. None of these affect the rules."""
    group_delay: float = 0.1  # Between two distance groups of a cascade
    flip_frame_delay: float = 0.05  # Per sprite frame of a single flip
    flip_frames: int = 1  # Frames the last group needs before the move settles
    end_screen_delay: float = 0.3  # After the final cascade, before the result shows

    @property
    def settle_delay(self) -> float:
        return self.flip_frame_delay * self.flip_frames


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = False
    verbose: bool = True


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    animation: AnimationConfig = field(default_factory=AnimationConfig)
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
            project_name=config_dict.get('project_name', 'Othello'),
            animation=AnimationConfig(**config_dict.get('animation', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config(path: Optional[str] = None) -> Config:
    """
    Get default configuration.

    Args:
        path: Optional JSON file; loaded when it exists
    """
    if path is not None and os.path.exists(path):
        return Config.load(path)
    return Config()
