"""CLI command for showing the efficiency analysis."""

from sd_efficiency.cli.session import session_from_args
from sd_efficiency.presenters import ConsolePresenter


def summary_command(args) -> int:
    """Execute the summary subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = nothing to analyse)
    """
    presenter = ConsolePresenter()
    session = session_from_args(args, presenter)

    if not session.request_analysis():
        presenter.show_info("Add test data rows to begin the efficiency analysis.")
        return 1

    snapshot = session.snapshot()
    presenter.show_summary(
        snapshot,
        session.health(snapshot),
        session.composition(),
        session.trend(),
    )
    return 0
