"""Filtering of a user's exercise log by date range and count."""

from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from pydantic import BaseModel

from utils.dates import day_of
from utils.validators import parse_date, parse_int


class LogQuery(BaseModel):
    """Optional bounds applied to a user's exercise log.

    ``from_date`` and ``to_date`` are inclusive calendar days. ``limit`` caps
    the number of admitted exercises.
    """
    from_date: Optional[date] = None
    to_date: Optional[date] = None
    limit: Optional[int] = None

    @classmethod
    def from_params(
        cls,
        from_: Optional[str] = None,
        to: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> "LogQuery":
        """Build a query from raw query-string values.

        Values that do not parse are dropped rather than reported.
        """
        parsed_limit = parse_int(limit) if limit else None
        if parsed_limit is not None and parsed_limit < 0:
            parsed_limit = None
        return cls(
            from_date=parse_date(from_) if from_ else None,
            to_date=parse_date(to) if to else None,
            limit=parsed_limit,
        )


def filter_log(
    exercises: Sequence[Dict[str, Any]],
    query: LogQuery,
    offset_hours: int = 0,
) -> List[Dict[str, Any]]:
    """Return the exercises that fall in the query's range, in input order.

    Once ``limit`` exercises have been admitted every later one is excluded,
    even when it is inside the date range.
    """
    admitted: List[Dict[str, Any]] = []
    for exercise in exercises:
        day = day_of(exercise["date"], offset_hours)
        if query.from_date is not None and day < query.from_date:
            continue
        if query.to_date is not None and day > query.to_date:
            continue
        if query.limit is not None and len(admitted) >= query.limit:
            continue
        admitted.append(exercise)
    return admitted
