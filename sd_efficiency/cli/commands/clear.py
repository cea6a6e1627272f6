"""CLI command for clearing all entries."""

from sd_efficiency.cli.session import session_from_args
from sd_efficiency.presenters import ConsolePresenter


def clear_command(args) -> int:
    """Execute the clear subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = cleared, 1 = aborted or the data file could not be deleted)
    """
    presenter = ConsolePresenter()
    session = session_from_args(args, presenter)

    if not args.yes:
        answer = input("Are you sure you want to clear all data? [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            presenter.show_info("Aborted.")
            return 1

    count = len(session.entries)
    if not session.clear_all():
        return 1
    presenter.show_success(f"Cleared {count} entries")
    return 0
