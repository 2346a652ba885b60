"""
Spire CLI - Command-line interface for the engine.

Usage:
    spire serve [--host H] [--port P]    Run the HTTP API with uvicorn
    spire play [--seed N]                Play a run in the terminal

In-game commands (play):
    p <n>   play the n-th card in hand (1-based)
    e       end turn
    s <n>   select the n-th reward card
    n       advance to the next level
    q       quit
"""

import argparse
import logging
import os
import random
import sys

from .content import create_default_content
from .engine_core.action import Action
from .engine_core.state import GameState, GamePhase
from .session import SessionManager


logger = logging.getLogger(__name__)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Spire - Turn-based card battle engine",
        prog="spire",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.add_argument("--reload", action="store_true", help="Auto-reload on code changes")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a run in the terminal")
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    play_parser.add_argument("--max-level", type=int, default=None, help="Number of levels")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "serve":
        cmd_serve(args)
    elif args.command == "play":
        cmd_play(args)
    else:
        parser.print_help()
        sys.exit(1)


def configure_logging(verbose: bool = False):
    level_name = "DEBUG" if verbose else os.getenv("SPIRE_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def cmd_serve(args):
    """Run the API server."""
    import uvicorn

    logger.info("Starting Spire API on %s:%d", args.host, args.port)
    uvicorn.run("spire.api.app:app", host=args.host, port=args.port, reload=args.reload)


def cmd_play(args):
    """Play a run in the terminal."""
    manager = SessionManager(
        content=create_default_content(max_level=args.max_level),
        rng=random.Random(args.seed),
    )
    session = manager.new_game()
    state = session.game_state
    shown = 0

    while True:
        shown = print_new_log(state, shown)
        print(render_state(state))

        try:
            line = input("> ")
        except EOFError:
            break

        if line.strip().lower() in {"q", "quit", "exit"}:
            break

        try:
            action = parse_command(line, state)
        except ValueError as e:
            print(f"  {e}")
            continue

        outcome = manager.apply(session.session_id, action)
        if not outcome.success:
            print(f"  {outcome.result.error}")
            continue
        state = outcome.session.game_state

    print("Goodbye.")


def parse_command(line: str, state: GameState) -> Action:
    """
    Turn a line of input into an Action.

    Card positions are 1-based indexes into the hand or the reward list.
    Raises ValueError for anything it cannot parse.
    """
    parts = line.strip().lower().split()
    if not parts:
        raise ValueError("Enter a command (p <n>, e, s <n>, n, q)")

    command = parts[0]
    if command in {"e", "end"}:
        return Action.end_turn()
    if command in {"n", "next"}:
        return Action.advance_level()
    if command in {"p", "play", "s", "select"}:
        if len(parts) != 2 or not parts[1].isdigit():
            raise ValueError(f"Usage: {command} <n>")
        index = int(parts[1]) - 1
        cards = state.hand if command in {"p", "play"} else (state.available_cards or [])
        if not 0 <= index < len(cards):
            raise ValueError(f"No card at position {parts[1]}")
        card = cards[index]
        if command in {"p", "play"}:
            return Action.play_card(card.card_id)
        return Action.select_card(card.card_id)

    raise ValueError(f"Unknown command: {command}")


def render_state(state: GameState) -> str:
    """Plain-text view of the board."""
    player = state.player
    enemy = state.enemy
    lines = [
        "",
        f"== Level {state.current_level}/{state.max_level}  Turn {state.turn}  [{state.phase.value}] ==",
        f"{enemy.name}: {enemy.health}/{enemy.max_health} HP  armor {enemy.armor}"
        + _format_statuses(enemy.status_effects),
        f"  Intent: {enemy.next_action_description}",
        f"You: {player.health}/{player.max_health} HP  armor {player.armor}  "
        f"energy {player.energy}/{player.max_energy}" + _format_statuses(player.status_effects),
        f"Deck {len(state.deck)}  Discard {len(state.discard_pile)}",
    ]

    if state.phase == GamePhase.COMBAT:
        lines.append("Hand:")
        for i, card in enumerate(state.hand, start=1):
            lines.append(f"  {i}. {card.name} ({card.cost}) - {card.description}")
    if state.available_cards:
        lines.append("Rewards:")
        for i, card in enumerate(state.available_cards, start=1):
            lines.append(f"  {i}. {card.name} ({card.cost}) - {card.description}")
    return "\n".join(lines)


def print_new_log(state: GameState, shown: int) -> int:
    """Print log lines added since the last call. Returns the new count."""
    for line in state.log[shown:]:
        print(f"* {line}")
    return len(state.log)


def _format_statuses(statuses) -> str:
    if not statuses:
        return ""
    return "  " + ", ".join(f"{s.name}({s.value})" for s in statuses)


if __name__ == "__main__":
    main()
