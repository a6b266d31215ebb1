"""caljal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize default engines on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    configure,
    leap_info,
    is_leap_year,
    month_length,
    days_in_year,
    jalali_to_julian_day,
    julian_day_to_jalali,
    normalize_date,
    jalali_to_gregorian,
    gregorian_to_jalali,
    from_gregorian,
    to_gregorian,
    apply_to,
    today,
    day_of_year,
    day_of_week,
    week_of_month,
    quarter,
    days_in_month,
    with_year,
    with_month,
    with_day,
    add_years,
    add_months,
    add_days,
    sub_years,
    sub_months,
    sub_days,
    start_of_month,
    end_of_month,
    start_of_year,
    end_of_year,
    start_of_decade,
    end_of_decade,
    start_of_century,
    end_of_century,
    validate_date,
    parse_date,
)
from .core.errors import CaljalError, ValidationError
from .core.time import floor_div, georgian_to_julian_day, julian_day_to_georgian
from .core.types import CalendarDate, LeapYearResult

__all__ = [
    "configure",
    "leap_info",
    "is_leap_year",
    "month_length",
    "days_in_year",
    "jalali_to_julian_day",
    "julian_day_to_jalali",
    "georgian_to_julian_day",
    "julian_day_to_georgian",
    "floor_div",
    "normalize_date",
    "jalali_to_gregorian",
    "gregorian_to_jalali",
    "from_gregorian",
    "to_gregorian",
    "apply_to",
    "today",
    "day_of_year",
    "day_of_week",
    "week_of_month",
    "quarter",
    "days_in_month",
    "with_year",
    "with_month",
    "with_day",
    "add_years",
    "add_months",
    "add_days",
    "sub_years",
    "sub_months",
    "sub_days",
    "start_of_month",
    "end_of_month",
    "start_of_year",
    "end_of_year",
    "start_of_decade",
    "end_of_decade",
    "start_of_century",
    "end_of_century",
    "validate_date",
    "parse_date",
    "CalendarDate",
    "LeapYearResult",
    "CaljalError",
    "ValidationError",
]
