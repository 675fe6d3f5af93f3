#!/usr/bin/env python3
"""
Montes Mystery Mansion terminal client.

Plays one session against the engine in the current terminal:

    python -m mansion --player alice --state-dir saves/
"""
import sys
import asyncio
import logging
import random
from pathlib import Path
from datetime import datetime

import click

from mansion.config import get_default_world, get_logs_dir, get_state_dir
from mansion.engine.processor import TurnProcessor
from mansion.engine.state import GameStateManager
from mansion.engine.store import InMemoryStateStore, JsonFileStateStore, StateStoreError
from mansion.engine.world import WorldDataError, WorldLoader
from mansion.llm.reinterpreter import ReinterpreterAI
from mansion.models.game import TurnResponse

PROMPT = "]"


def setup_logging(debug: bool = False) -> Path:
    """Configure logging to a session file, keeping the terminal clean.

    Returns:
        Path to the log file
    """
    logs_dir = get_logs_dir() / "cli"
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    log_file = logs_dir / f"cli_{timestamp}.log"

    # File handler - always verbose
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    ))

    # Console handler - errors only unless debugging, the terminal is the game screen
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO if debug else logging.ERROR)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.getLogger("litellm").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return log_file


def render(response: TurnResponse) -> None:
    """Print a turn's narration followed by Doubt's line."""
    for line in response.narration:
        click.echo(line)
    if response.doubt_line:
        click.echo(f"DOUBT: {response.doubt_line}")


async def play(processor: TurnProcessor) -> None:
    """Read submissions until the session ends or input runs out."""
    render(processor.start())

    while True:
        try:
            action = click.prompt(PROMPT, default="", show_default=False, prompt_suffix=" ")
        except click.Abort:
            click.echo()
            return

        response = await processor.process(action)
        render(response)
        if response.session_ended:
            return


@click.command()
@click.option('--player', default='player', show_default=True, help='Save slot to play')
@click.option('--world', 'world_id', default=None, help='World to load (default: MANSION_WORLD)')
@click.option('--state-dir', type=click.Path(file_okay=False), default=None,
              help='Directory for JSON saves (default: MANSION_STATE_DIR, else in memory)')
@click.option('--seed', type=int, default=None, help='Seed for narration choices')
@click.option('--debug', is_flag=True, help='Enable debug mode')
def main(player: str, world_id: str | None, state_dir: str | None, seed: int | None, debug: bool):
    """Play Montes Mystery Mansion in the terminal."""
    log_file = setup_logging(debug=debug)
    world_id = world_id or get_default_world()
    state_dir = state_dir or get_state_dir()

    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info("Mystery Mansion starting")
    logger.info(f"World: {world_id}, player: {player}")
    logger.info(f"State dir: {state_dir or 'in memory'}")
    logger.info(f"Log file: {log_file}")
    logger.info("=" * 60)

    store = JsonFileStateStore(state_dir) if state_dir else InMemoryStateStore()
    try:
        world = WorldLoader().load_world(world_id)
        manager = GameStateManager(world, store, player, world_id)
    except (FileNotFoundError, WorldDataError, StateStoreError) as e:
        logger.error(f"Cannot start: {e}")
        click.echo(f"Unable to start the game: {e}", err=True)
        sys.exit(1)

    processor = TurnProcessor(
        manager,
        reinterpreter=ReinterpreterAI(session_id=manager.session_id),
        rng=random.Random(seed),
        log_turns=True,
    )

    try:
        asyncio.run(play(processor))
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        raise
    finally:
        logger.info("Mystery Mansion shutdown")


if __name__ == "__main__":
    main()
