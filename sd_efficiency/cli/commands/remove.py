"""CLI command for removing an entry."""

from sd_efficiency.cli.session import session_from_args
from sd_efficiency.presenters import ConsolePresenter


def remove_command(args) -> int:
    """Execute the remove subcommand.

    Removing an unknown id leaves the log unchanged.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = removed, 1 = no such entry)
    """
    presenter = ConsolePresenter()
    session = session_from_args(args, presenter)

    if session.remove_entry(args.entry_id):
        presenter.show_success(f"Removed entry {args.entry_id}")
        return 0

    presenter.show_warning(f"No entry with id {args.entry_id}")
    return 1
