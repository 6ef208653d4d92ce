"""CLI command for batch simulation against the computer."""

from __future__ import annotations

import logging

import click

from crazyeights.simulation.players import GreedyPlayer, RandomPlayer, SeatPlayer
from crazyeights.simulation.runner import DEFAULT_MAX_TURNS, simulate_game, summarize


def _make_player(name: str, seed: int) -> SeatPlayer:
    if name == "random":
        return RandomPlayer(seed=seed)
    return GreedyPlayer()


@click.command()
@click.option("-n", "--games", type=click.IntRange(min=1), default=100, show_default=True)
@click.option(
    "-p", "--player",
    type=click.Choice(["random", "greedy"]),
    default="greedy",
    show_default=True,
    help="Policy used for the human seat",
)
@click.option("--seed", type=int, default=0, show_default=True, help="Seed of the first game")
@click.option("--max-turns", type=int, default=DEFAULT_MAX_TURNS, show_default=True)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(games: int, player: str, seed: int, max_turns: int, verbose: bool):
    """Simulate games with a scripted player against the computer."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")

    seat = _make_player(player, seed)
    results = [simulate_game(seat, seed + i, max_turns=max_turns) for i in range(games)]
    stats = summarize(results)

    click.echo(f"Games: {games} ({player} vs computer)")
    click.echo(f"  Player wins:   {stats['player']:.1%}")
    click.echo(f"  Computer wins: {stats['ai']:.1%}")
    click.echo(f"  Stalled:       {stats['stalled']:.1%}")
    click.echo(f"  Avg turns:     {stats['avg_turns']:.1f}")


if __name__ == "__main__":
    main()
