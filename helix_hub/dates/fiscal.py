"""
Fiscal year boundaries.

The practice's leave year runs from 1 April to 31 March.
"""

from dataclasses import dataclass
from datetime import date

FISCAL_YEAR_START_MONTH = 4


@dataclass(frozen=True)
class FiscalYear:
    """An inclusive 1 April - 31 March date range."""

    start: date
    end: date

    def __contains__(self, day: date) -> bool:
        return self.start <= day <= self.end

    @property
    def label(self) -> str:
        """Human-readable label, e.g. "2024/25"."""
        return f"{self.start.year}/{str(self.end.year)[-2:]}"


def get_fiscal_year(day: date) -> FiscalYear:
    """
    Get the fiscal year containing ``day``.

    January to March belong to the fiscal year that started the
    previous April.
    """
    start_year = day.year if day.month >= FISCAL_YEAR_START_MONTH else day.year - 1
    return FiscalYear(
        start=date(start_year, FISCAL_YEAR_START_MONTH, 1),
        end=date(start_year + 1, 3, 31),
    )
