"""Interface protocols for SD Efficiency."""

from .capabilities import Clock, IdFactory, system_clock, uuid_id_factory
from .presenter import PresenterProtocol

__all__ = ["Clock", "IdFactory", "PresenterProtocol", "system_clock", "uuid_id_factory"]
