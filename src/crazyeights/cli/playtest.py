"""CLI command for playing against the computer."""

from __future__ import annotations

import logging
import sys

import click

from crazyeights.errors import SetupError
from crazyeights.playtest.session import PlaytestSession, SessionConfig
from crazyeights.playtest.input import HumanPlayer

logger = logging.getLogger(__name__)


@click.command()
@click.option("--debug", is_flag=True, help="Show the computer's hand")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option(
    "--ai-delay",
    type=click.FloatRange(min=0),
    default=1.5,
    show_default=True,
    help="Seconds to wait before the computer moves",
)
@click.option("--max-turns", type=int, default=500, help="Turn limit before forced end")
@click.option("--show-rules/--no-rules", default=True, help="Display rules at start")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    debug: bool,
    seed: int | None,
    ai_delay: float,
    max_turns: int,
    show_rules: bool,
    verbose: bool,
):
    """Play Crazy Eights against the computer."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    prompt = HumanPlayer()
    while True:
        config = SessionConfig(
            ai_delay=ai_delay,
            debug=debug,
            max_turns=max_turns,
            seed=seed,
            show_rules=show_rules,
        )
        session = PlaytestSession(config)

        try:
            result = session.run(output_fn=click.echo)
        except SetupError as e:
            click.echo(f"Could not start the game: {e}", err=True)
            sys.exit(1)
        except KeyboardInterrupt:
            click.echo("\n\nGame interrupted.")
            break

        logger.debug(f"Session finished: {result}")
        if result.quit_early:
            break
        if not prompt.get_yes_no("\nPlay again? [y/n]: "):
            break
        # A replayed seed would deal the same game again
        seed = None
        show_rules = False

    click.echo("\nThanks for playing!")


if __name__ == "__main__":
    main()
