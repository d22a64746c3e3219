"""ldraw-pack - pack an LDraw model and all its parts into one MPD file."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click
from rich.markup import escape

from ldraw_packer.console import console
from ldraw_packer.console import err_console
from ldraw_packer.exceptions import PackerError
from ldraw_packer.log import setup_logging
from ldraw_packer.runner import pack_model
from ldraw_packer.settings import load_settings


async def _run(
    model_name: str,
    ldraw_dir: Path | None,
    output: Path | None,
    api_key: str | None,
    no_lookup: bool,
):
    settings = await load_settings(ldraw_dir, api_key=api_key, lookup_enabled=False if no_lookup else None)
    return await pack_model(model_name, settings, output)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("model", nargs=-1)
@click.option(
    "--ldraw-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="LDraw library root (default: $LDRAW_DIR or the current directory)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file (default: <model>_Packed.mpd next to the model)",
)
@click.option("--api-key", default=None, help="Rebrickable API key (default: $REBRICKABLE_API_KEY)")
@click.option("--no-lookup", is_flag=True, help="Never query Rebrickable for missing parts")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def main(
    ctx: click.Context,
    model: tuple[str, ...],
    ldraw_dir: Path | None,
    output: Path | None,
    api_key: str | None,
    no_lookup: bool,
    verbose: bool,
) -> None:
    """Pack MODEL and every part it references into a single MPD file.

    MODEL is relative to the library root, e.g. models/car.ldr.

    Parts missing from the library are looked up on Rebrickable by their
    BrickLink id; parts without an LDraw equivalent fall back to the
    unprinted base part.
    """
    if len(model) != 1:
        click.echo(ctx.get_usage())
        return

    setup_logging("DEBUG" if verbose else None)

    try:
        outcome = asyncio.run(_run(model[0], ldraw_dir, output, api_key, no_lookup))
    except (PackerError, OSError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    if outcome.result.unsupported:
        names = ", ".join(outcome.result.unsupported)
        console.print(f"[yellow]Couldn't find LDraw equivalents for:[/yellow] {escape(names)}")
        console.print("[yellow]Some parts may not render correctly.[/yellow]")


if __name__ == "__main__":
    main()
