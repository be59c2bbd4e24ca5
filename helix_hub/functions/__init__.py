"""Azure Functions HTTP endpoints, one blueprint per route."""

from . import annual_leave, attendance, bank_holidays, enquiries, presence, team

BLUEPRINTS = [
    attendance.bp,
    annual_leave.bp,
    team.bp,
    presence.bp,
    bank_holidays.bp,
    enquiries.bp,
]

__all__ = ["BLUEPRINTS"]
