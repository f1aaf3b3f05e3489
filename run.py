"""
Play Othello in the terminal.
Moves are typed as "x y"; "r" restarts, "q" quits.
"""
import os
import sys
import argparse
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.config import Config, get_default_config
from othello.game import MoveError
from othello.logger import setup_logger
from othello.session import GameSession


def parse_move(text: str):
    """Parse "x y" or "x,y" into a tuple of ints."""
    parts = text.replace(',', ' ').split()
    if len(parts) != 2:
        raise ValueError(f"Expected two coordinates, got {text!r}")
    return int(parts[0]), int(parts[1])


def play(session: GameSession, lines, out=sys.stdout):
    """Run the command loop over an iterable of input lines."""
    game = session.game
    print(game, file=out)
    for line in lines:
        command = line.strip().lower()
        if not command:
            continue
        if command == 'q':
            break
        if command == 'r':
            session.restart()
            print(game, file=out)
            continue

        try:
            x, y = parse_move(command)
            report = session.place(x, y)
        except (ValueError, MoveError) as e:
            print(f"Rejected: {e}", file=out)
            continue

        # Step the cascade with a fixed frame time
        step = session.config.animation.group_delay or 0.1
        while session.animating:
            for batch in session.tick(step):
                print(f"  flip d={batch.distance}: {list(batch.positions)}", file=out)
        print(f"{report.color} played {report.placed}", file=out)
        print(game, file=out)

        if game.is_game_over():
            session.tick(session.config.animation.end_screen_delay)
            print(session.result_text(), file=out)


def main():
    parser = argparse.ArgumentParser(description='Play Othello in the terminal')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Override the configured log level')
    args = parser.parse_args()

    # Load configuration
    if os.path.exists(args.config):
        print(f"Loading configuration from {args.config}")
        config = Config.load(args.config)
    else:
        config = get_default_config()
    if args.log_level:
        config.logging.log_level = args.log_level

    session = GameSession(config, log=setup_logger(config))
    try:
        play(session, sys.stdin)
    finally:
        session.close()


if __name__ == "__main__":
    main()
