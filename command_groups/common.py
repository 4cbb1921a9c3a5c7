from __future__ import annotations

import functools
from typing import Any, Callable

import click

from context_state import ContextState
from errors import SmallYamlError, YamlSyntaxError
from logging_utils import get_logger
from yaml_parser import load
from yaml_tree import Document

logger = get_logger(__name__)


def load_document(state: ContextState, file: str) -> Document:
    """Parse ``file`` once per invocation and cache it on ``state``."""

    if file in state.documents:
        logger.debug("Reusing parsed document for '%s'", file)
        return state.documents[file]

    try:
        document = load(file)
    except YamlSyntaxError as exc:
        raise click.ClickException(f"{file}: {exc}") from exc
    except SmallYamlError as exc:
        raise click.ClickException(str(exc)) from exc

    logger.debug(
        "Loaded '%s' with %d top-level node(s)", file, document.child_count()
    )
    state.documents[file] = document
    return document


def ensure_document(argument: str = "file") -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Replace the ``argument`` file name with its parsed :class:`Document`.

    The wrapped command receives the click context first and the document as
    the ``document`` keyword.
    """

    def decorator(command: Callable[..., Any]) -> Callable[..., Any]:
        @click.pass_context
        @functools.wraps(command)
        def wrapper(ctx: click.Context, *args: Any, **kwargs: Any) -> Any:
            state = ctx.ensure_object(ContextState)
            file = kwargs.pop(argument)
            kwargs["document"] = load_document(state, file)
            return command(ctx, *args, **kwargs)

        return wrapper

    return decorator
