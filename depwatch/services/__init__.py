"""Remote services used by depwatch."""

from .stats_service import GoSearchStatsService, normalize_package_name

__all__ = ['GoSearchStatsService', 'normalize_package_name']
