"""Date helpers: week ranges, fiscal years and bank holidays."""

from .bank_holidays import BankHolidayClient
from .fiscal import FiscalYear, get_fiscal_year
from .weeks import (
    WeekRanges,
    attendance_includes_day,
    day_name,
    format_date,
    format_week_range,
    get_end_of_week,
    get_next_week_start,
    get_next_working_day,
    get_start_of_week,
    today,
)

__all__ = [
    "BankHolidayClient",
    "FiscalYear",
    "WeekRanges",
    "attendance_includes_day",
    "day_name",
    "format_date",
    "format_week_range",
    "get_end_of_week",
    "get_fiscal_year",
    "get_next_week_start",
    "get_next_working_day",
    "get_start_of_week",
    "today",
]
