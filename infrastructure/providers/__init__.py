from .base import RateSnapshotProvider
from .frankfurter import FrankfurterProvider

__all__ = ['RateSnapshotProvider', 'FrankfurterProvider']
