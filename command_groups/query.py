import click

from command_groups.common import ensure_document
from context_state import ContextState
from yaml_tree import Document

FILE_ARGUMENT = click.Path(exists=False, dir_okay=False, path_type=str)


@click.command("get")
@click.argument("file", type=FILE_ARGUMENT)
@click.argument("path")
@ensure_document()
def get(ctx: click.Context, path: str, document: Document) -> None:
    """Print the scalar value stored at PATH."""

    state: ContextState = ctx.obj
    value = document.find_value(state.resolve_path(path))
    if value is None:
        raise click.ClickException(f"No scalar value at '{path}'")

    click.echo(value)


@click.command("exists")
@click.argument("file", type=FILE_ARGUMENT)
@click.argument("path")
@ensure_document()
def exists(ctx: click.Context, path: str, document: Document) -> None:
    """Report whether a node is defined at PATH."""

    state: ContextState = ctx.obj
    found = document.exists(state.resolve_path(path))
    click.echo("true" if found else "false")
    if not found:
        ctx.exit(1)


@click.command("count")
@click.argument("file", type=FILE_ARGUMENT)
@click.argument("path", required=False)
@ensure_document()
def count(ctx: click.Context, path: str | None, document: Document) -> None:
    """Print how many children the node at PATH has (top level by default)."""

    state: ContextState = ctx.obj
    click.echo(document.count_elements(state.resolve_path(path)))


@click.command("keys")
@click.argument("file", type=FILE_ARGUMENT)
@ensure_document()
def keys(ctx: click.Context, document: Document) -> None:
    """List every scalar leaf as ``path = value``."""

    state: ContextState = ctx.obj
    for path, value in document.iter_scalars():
        rendered = state.separator.join(path.segments())
        click.echo(f"{rendered} = {'' if value is None else value}")
