from typing import Tuple

import click

from command_groups.common import load_document
from context_state import ContextState


@click.command("check")
@click.argument("files", nargs=-1, required=True, type=click.Path(path_type=str))
@click.pass_context
def check(ctx: click.Context, files: Tuple[str, ...]) -> None:
    """Parse each FILE and report the ones that fail."""

    state = ctx.ensure_object(ContextState)
    failures = 0
    for file in files:
        try:
            load_document(state, file)
        except click.ClickException as exc:
            failures += 1
            click.echo(exc.format_message(), err=True)
            continue

        click.echo(f"{file}: ok")

    if failures:
        raise click.ClickException(f"{failures} of {len(files)} file(s) failed to parse")
