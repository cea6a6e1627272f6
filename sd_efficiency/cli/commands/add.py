"""CLI command for logging a new stress-test entry."""

from sd_efficiency.cli.session import session_from_args
from sd_efficiency.exceptions import EntryValidationError
from sd_efficiency.presenters import ConsolePresenter
from sd_efficiency.utils import format_percent


def add_command(args) -> int:
    """Execute the add subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    session = session_from_args(args, presenter)

    try:
        entry = session.add_entry(args.total, args.good, args.bad)
    except EntryValidationError as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_success(
        f"Logged entry {entry.id} ({format_percent(entry.efficiency)} efficiency)"
    )
    return 0
