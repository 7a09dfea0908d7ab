"""
Unit tests for per-entity extractors
"""

import pytest
from datetime import date, timedelta
from decimal import Decimal

from core.exceptions import RowDecodeError
from migration.extractors import (
    EXTRACTOR_CLASSES,
    CoursesExtractor,
    HorsesExtractor,
    PreRaceExtractor,
    RacesExtractor,
    ResultsExtractor,
    default_extractors,
)


def race_record(**overrides):
    record = {
        "raceID": 812345,
        "courseID": 2,
        "date": date(2024, 6, 18),
        "time": timedelta(hours=14, minutes=30),
        "url": "https://www.racingpost.com/results/2/ascot/2024-06-18/812345",
        "class": None,
        "distance": Decimal("8.0"),
        "going": "Good to Firm",
        "mr": None,
        "mr2": None,
        "analysed": 0,
        "preDone": 1,
        "mainComment": None,
        "amended": 0,
    }
    record.update(overrides)
    return record


class TestRacesExtractor:

    def test_transform_race(self):
        row = RacesExtractor().transform(race_record())

        assert row.race_id == 812345
        assert row.course_id == 2
        assert row.date == "2024-06-18"
        assert row.time == "14:30:00"
        assert row.race_class is None
        assert row.distance == 8.0
        assert row.pre_done is True
        assert row.analysed is False
        assert row.mr is None

    def test_insert_params_use_column_keys(self):
        params = RacesExtractor().transform(race_record(**{"class": "3"})).to_insert_params()

        assert params["race_class"] == "3"
        assert "main_comment" in params and params["main_comment"] is None

    def test_bad_date_reports_row_position(self):
        extractor = RacesExtractor()

        with pytest.raises(RowDecodeError) as exc_info:
            extractor.decode(race_record(date="18/06/2024"), row_number=7)

        context = exc_info.value.context
        assert context["entity"] == "races"
        assert context["source_table"] == "races"
        assert context["row_number"] == 7

    def test_negative_off_time_rejected(self):
        with pytest.raises(RowDecodeError) as exc_info:
            RacesExtractor().decode(race_record(time=timedelta(minutes=-1)), row_number=3)

        assert exc_info.value.context["row_number"] == 3
        assert isinstance(exc_info.value.original_exception, ValueError)

    def test_missing_required_value(self):
        with pytest.raises(RowDecodeError) as exc_info:
            RacesExtractor().decode(race_record(going=None), row_number=1)

        assert exc_info.value.context["field_errors"]

    def test_query_selects_source_columns(self):
        query = RacesExtractor().build_query()

        assert "preDone" in query.selected_columns.keys()
        assert "class" in query.selected_columns.keys()


class TestOtherExtractors:

    def test_course_flag(self):
        row = CoursesExtractor().transform({
            "courseID": 1038, "course": "Dundalk", "direction": "Left-handed",
            "isAw": 1, "code": "DUN",
        })

        assert row.is_aw is True

    def test_horse_nulls_not_zeroed(self):
        row = HorsesExtractor().transform({
            "horseID": 5, "horse": "Denman", "lastWinID": None,
            "highestWinWeight": None, "lastWinWeight": 0, "lastRunWeight": None,
            "lastWinClaim": None, "lastRunClaim": None, "highestWinOr": None,
        })

        assert row.highest_win_weight is None
        assert row.last_win_weight == 0

    def test_pre_race_runners_untouched(self):
        runners = b'[{"horse":"Kauto Star",  "number":1}]'
        row = PreRaceExtractor().transform({
            "id": 1, "runners": runners, "course": "Ascot", "courseID": 2,
            "date": "2024-06-18", "time": "14:30", "raceID": 812345,
            "direction": "Right-handed", "distance": 8.0, "class": "1",
            "url": "https://www.racingpost.com/racecards/2/ascot/2024-06-18/812345",
        })

        assert row.runners == runners.decode("utf-8")
        assert row.date == "2024-06-18"

    def test_incomplete_record_rejected(self):
        extractor = ResultsExtractor()

        with pytest.raises(RowDecodeError):
            extractor.decode({"id": 1}, row_number=1)


class TestExtractorRegistry:

    def test_default_order(self):
        names = [e.name for e in default_extractors()]

        assert names == [
            "users", "courses", "horses", "trainers",
            "races", "pre_race", "results", "intermediary",
        ]

    def test_batch_size_passed_through(self):
        assert all(e.batch_size == 50 for e in default_extractors(50))

    def test_every_extractor_targets_a_distinct_table(self):
        tables = [cls.model.__tablename__ for cls in EXTRACTOR_CLASSES]

        assert len(set(tables)) == len(tables)
