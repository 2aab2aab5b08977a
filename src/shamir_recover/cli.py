# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

# src/shamir_recover/cli.py
"""Command line interface for secret reconstruction."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from tabulate import tabulate

from . import config
from .decoder import MAX_BASE, MIN_BASE, decode, encode
from .errors import ReconstructionError
from .shares import ShareSet, load_share_file, recover_secret

_logger = logging.getLogger(__name__)


def _echo_points(share_set: ShareSet, output_base: int) -> None:
    selected = {p.x for p in share_set.selected()}
    click.echo(f"n (total points): {encode(share_set.n, 10)}")
    click.echo(f"k (minimum needed): {encode(share_set.k, 10)}")
    click.echo(f"Polynomial degree: {encode(share_set.degree, 10)}")
    rows = [
        (encode(p.x, 10), encode(p.y, output_base), "yes" if p.x in selected else "")
        for p in share_set.points
    ]
    click.echo(tabulate(rows, headers=["x", "y", "selected"], disable_numparse=True))


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(config.LOG_LEVELS, case_sensitive=False),
    default=lambda: config.settings.log_level,
    show_default="WARNING",
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """Reconstruct Shamir-style secrets from JSON share documents."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--show-points", is_flag=True, help="Print the decoded points and the selected subset.")
@click.option(
    "--output-base",
    type=click.IntRange(MIN_BASE, MAX_BASE),
    default=lambda: config.settings.output_base,
    show_default="10",
    help="Base used to print the secret.",
)
@click.pass_context
def recover(ctx: click.Context, files: tuple[Path, ...], show_points: bool, output_base: int) -> None:
    """Recover the secret stored in each share FILE."""
    failed = False
    for path in files:
        try:
            share_set = load_share_file(path)
            secret = recover_secret(share_set)
        except (ReconstructionError, OSError) as exc:
            failed = True
            _logger.debug("reconstruction failed for %s", path, exc_info=True)
            click.echo(f"{path}: {type(exc).__name__}: {exc}", err=True)
            continue

        if show_points:
            _echo_points(share_set, output_base)
        rendered = encode(secret, output_base)
        if len(files) == 1:
            click.echo(f"Secret: {rendered}")
        else:
            click.echo(f"{path}: {rendered}")

    if failed:
        ctx.exit(1)


@cli.command("decode")
@click.argument("value")
@click.option("--base", type=int, required=True, help="Base VALUE is written in.")
@click.option(
    "--output-base",
    type=click.IntRange(MIN_BASE, MAX_BASE),
    default=lambda: config.settings.output_base,
    show_default="10",
    help="Base used to print the result.",
)
def decode_command(value: str, base: int, output_base: int) -> None:
    """Decode VALUE written in BASE."""
    try:
        click.echo(encode(decode(value, base), output_base))
    except ReconstructionError as exc:
        raise click.ClickException(f"{type(exc).__name__}: {exc}") from exc


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
