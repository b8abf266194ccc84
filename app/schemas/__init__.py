from app.schemas.raw_series import RawSeries
from app.schemas.stats import Stats

__all__ = [
    "RawSeries",
    "Stats",
]
