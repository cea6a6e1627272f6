"""CLI command for listing logged entries."""

from sd_efficiency.cli.session import session_from_args
from sd_efficiency.presenters import ConsolePresenter


def list_command(args) -> int:
    """Execute the list subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (always 0)
    """
    presenter = ConsolePresenter()
    session = session_from_args(args, presenter)
    presenter.show_entries(list(session.entries))
    return 0
