"""Domain type definitions for dayspan.

These NewTypes provide semantic clarity and help with type checking:
- DateString: Day in YYYY-MM-DD format
- MonthString: Month in YYYY-MM format
- TimezoneName: IANA name or fixed offset (e.g. "Asia/Tokyo", "+09:00")

Unit enumerates the calendar periods a value can be shifted by.
"""

from enum import Enum
from typing import NewType

# Canonical string form of a Day (e.g., "2025-01-31")
DateString = NewType("DateString", str)

# Canonical string form of a Month (e.g., "2025-01")
MonthString = NewType("MonthString", str)

# Timezone identifier as reported by pendulum
TimezoneName = NewType("TimezoneName", str)


class Unit(str, Enum):
    """Calendar period used by shift operations."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
    CENTURY = "century"

    @property
    def plural(self) -> str:
        if self is Unit.CENTURY:
            return "centuries"
        return f"{self.value}s"

    @classmethod
    def from_name(cls, name: str) -> "Unit":
        """Look up a unit by singular or plural name ("month", "Months").

        Raises:
            ValueError: If no unit has that name.
        """
        key = name.strip().lower()
        for unit in cls:
            if key in (unit.value, unit.plural):
                return unit
        raise ValueError(f"Unknown unit '{name}'")

    def offset(self, count: int) -> dict[str, int]:
        """Keyword arguments for pendulum's add() moving by count units."""
        if self is Unit.QUARTER:
            return {"months": 3 * count}
        if self is Unit.CENTURY:
            return {"years": 100 * count}
        return {self.plural: count}
