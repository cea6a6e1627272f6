"""Factory for wiring a dashboard session from configuration."""

from sd_efficiency.config import SdEfficiencyConfig
from sd_efficiency.interfaces import Clock, IdFactory, PresenterProtocol
from sd_efficiency.services import AggregateCalculator, EntryStore, EntryValidator

from .dashboard_session import DashboardSession


def create_dashboard_session(
    config: SdEfficiencyConfig,
    presenter: PresenterProtocol | None = None,
    clock: Clock | None = None,
    id_factory: IdFactory | None = None,
    load: bool = True,
) -> DashboardSession:
    """Create a DashboardSession with all services configured.

    Args:
        config: Configuration to use
        presenter: Optional presenter for storage warnings
        clock: Optional clock override (epoch milliseconds)
        id_factory: Optional entry id generator override
        load: Whether to load persisted entries immediately

    Returns:
        Configured DashboardSession
    """
    validator = EntryValidator(
        tolerance=config.tolerance,
        precision=config.efficiency_precision,
        clock=clock,
        id_factory=id_factory,
    )
    calculator = AggregateCalculator(
        healthy_threshold=config.healthy_threshold,
        fair_threshold=config.fair_threshold,
    )
    session = DashboardSession(
        validator=validator,
        calculator=calculator,
        store=EntryStore(config.data_file, tolerance=config.tolerance),
        presenter=presenter,
    )
    if load:
        session.load()
    return session
