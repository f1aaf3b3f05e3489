"""
Test script for configuration and logging setup.
"""
import json
import logging
import os
import sys
import tempfile
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.absolute() / "src"))

from othello.config import Config, get_default_config
from othello.game import CellState, ForcedPass
from othello.logger import Logger, setup_logger


def test_config_creation():
    """Test creating, saving and loading a config."""
    config = get_default_config()
    assert config.project_name == "Othello"
    assert config.animation.group_delay == 0.1
    assert config.animation.end_screen_delay == 0.3
    assert config.animation.settle_delay == config.animation.flip_frame_delay

    with tempfile.TemporaryDirectory() as tmp:
        test_path = os.path.join(tmp, "nested", "test_config.json")
        config.animation.group_delay = 0.25
        config.save(test_path)

        loaded_config = Config.load(test_path)
        assert config.to_dict() == loaded_config.to_dict(), "Loaded config should match original"
        assert get_default_config(test_path).animation.group_delay == 0.25


def test_partial_config():
    config = Config.from_dict({'animation': {'group_delay': 0.2}})
    assert config.animation.group_delay == 0.2
    assert config.animation.end_screen_delay == 0.3
    assert config.logging.log_level == "INFO"


def test_default_config_file():
    """Test loading the shipped config file."""
    config_path = Path(__file__).parent / "configs" / "default_config.json"
    config = Config.load(str(config_path))
    assert config.to_dict() == Config().to_dict()


def test_missing_default_falls_back():
    assert get_default_config("does/not/exist.json").to_dict() == Config().to_dict()


def test_logger_writes_file():
    with tempfile.TemporaryDirectory() as tmp:
        config = Config()
        config.logging.log_to_file = True
        config.logging.verbose = False
        logger = Logger(config, log_dir=tmp)
        try:
            logger.log_event(ForcedPass(passed=CellState.WHITE, mover=CellState.BLACK))
            logging.getLogger('othello.game.game').info("from a module logger")
        finally:
            logger.close()

        with open(logger.log_file) as f:
            text = f.read()
        assert "ForcedPass: passed=White mover=Black" in text
        assert "from a module logger" in text
        assert logger.handlers == []


def test_setup_logger_console_only():
    config = Config()
    config.logging.log_level = "debug"
    logger = setup_logger(config)
    try:
        assert logger.log_file is None
        assert len(logger.handlers) == 1
        assert logging.getLogger('othello').level == logging.DEBUG
    finally:
        logger.close()


if __name__ == "__main__":
    print("Running config tests...\n")

    test_config_creation()
    test_partial_config()
    test_default_config_file()
    test_missing_default_falls_back()
    test_logger_writes_file()
    test_setup_logger_console_only()

    print("\nAll tests passed successfully!")
