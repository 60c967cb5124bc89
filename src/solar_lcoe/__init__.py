"""Solar LCOE calculator — levelized cost of energy engine and sensitivity tools."""

from solar_lcoe.config import ProjectInputs
from solar_lcoe.engine import evaluate
from solar_lcoe.errors import InvalidInputError
from solar_lcoe.models import ProjectResult

__all__ = [
    "evaluate",
    "ProjectInputs",
    "ProjectResult",
    "InvalidInputError",
]
