from .check import check
from .query import count, exists, get, keys

__all__ = ["check", "count", "exists", "get", "keys"]


def register_command_groups(cli) -> None:
    cli.add_command(get)
    cli.add_command(exists)
    cli.add_command(count)
    cli.add_command(keys)
    cli.add_command(check)
