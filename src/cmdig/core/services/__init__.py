"""Service layer wrapping the core dashboard packages."""

from cmdig.core.services.dig import DigService

__all__ = ["DigService"]
