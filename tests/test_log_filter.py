from datetime import date, datetime, timezone

from services.log_filter import LogQuery, filter_log


def _exercise(day, description=None):
    return {
        "description": description or day,
        "duration": 10,
        "date": datetime.fromisoformat(day).replace(hour=12, tzinfo=timezone.utc),
    }


EXERCISES = [_exercise("2023-01-01"), _exercise("2023-01-05"), _exercise("2023-01-10")]


def _days(log):
    return [exercise["description"] for exercise in log]


def test_no_bounds_returns_everything():
    assert _days(filter_log(EXERCISES, LogQuery())) == ["2023-01-01", "2023-01-05", "2023-01-10"]


def test_limit_keeps_first_in_order():
    assert _days(filter_log(EXERCISES, LogQuery(limit=2))) == ["2023-01-01", "2023-01-05"]


def test_date_range():
    query = LogQuery(from_date=date(2023, 1, 2), to_date=date(2023, 1, 6))
    assert _days(filter_log(EXERCISES, query)) == ["2023-01-05"]


def test_bounds_are_inclusive():
    query = LogQuery(from_date=date(2023, 1, 5), to_date=date(2023, 1, 10))
    assert _days(filter_log(EXERCISES, query)) == ["2023-01-05", "2023-01-10"]


def test_limit_counts_only_admitted_exercises():
    query = LogQuery(from_date=date(2023, 1, 2), limit=1)
    assert _days(filter_log(EXERCISES, query)) == ["2023-01-05"]


def test_limit_zero_excludes_everything():
    assert filter_log(EXERCISES, LogQuery(limit=0)) == []


def test_time_of_day_ignored_at_offset():
    late = {"description": "late", "duration": 5,
            "date": datetime(2023, 1, 1, 23, 30, tzinfo=timezone.utc)}
    query = LogQuery(from_date=date(2023, 1, 2))
    assert filter_log([late], query) == []
    assert _days(filter_log([late], query, offset_hours=2)) == ["late"]


def test_invalid_params_are_dropped():
    query = LogQuery.from_params("2023-02-30", "not-a-date", "two")
    assert query == LogQuery()


def test_negative_limit_is_dropped():
    assert LogQuery.from_params(limit="-1").limit is None


def test_params_are_parsed():
    query = LogQuery.from_params("2023-01-02", "2023-01-06", "3")
    assert query.from_date == date(2023, 1, 2)
    assert query.to_date == date(2023, 1, 6)
    assert query.limit == 3
