"""CLI command for exporting entries to CSV."""

from pathlib import Path

from sd_efficiency.cli.session import session_from_args
from sd_efficiency.exceptions import SdEfficiencyException
from sd_efficiency.presenters import ConsolePresenter
from sd_efficiency.services import ExportService


def export_command(args) -> int:
    """Execute the export subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    session = session_from_args(args, presenter)
    output_path = Path(args.output).expanduser()

    try:
        count = ExportService().export_csv(session.entries, output_path)
    except SdEfficiencyException as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_success(f"Exported {count} entries to {output_path}")
    return 0
