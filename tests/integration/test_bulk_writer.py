# ============================================================================
# File: tests/integration/test_bulk_writer.py
# ============================================================================

import pytest
from sqlalchemy import select

from conftest import RUNNERS_JSON
from core.database import create_tables
from migration.loaders import BulkWriter
from models import Course, PreRace, Race
from schemas.rows import CourseRow, PreRaceRow, RaceRow


async def write_meeting(conn, race_class="1", card_class="Class 1"):
    writer = BulkWriter(conn)
    await writer.write(Course, [
        CourseRow(course_id=1, course="Cheltenham", direction="Left-handed", is_aw=False, code="CHE"),
    ])
    await writer.write(Race, [
        RaceRow(
            race_id=1, course_id=1, date="2024-03-15", time="15:30:00",
            url="https://example.com/race/1", race_class=race_class, distance=5230.0,
            going="Good to Soft", analysed=False, pre_done=True, amended=False,
        ),
    ])
    await writer.write(PreRace, [
        PreRaceRow(
            id=1, runners=RUNNERS_JSON, course="Cheltenham", course_id=1,
            date="2024-03-15", time="15:30:00", race_id=1, direction="Left-handed",
            distance=5230.0, race_class=card_class, url="https://example.com/card/1",
        ),
    ])


class TestClassColumn:
    """The class value survives the trip through the writer"""

    @pytest.mark.asyncio
    async def test_race_and_card_class_stored(self, target_engine):
        async with target_engine.connect() as conn:
            await create_tables(conn)
            await write_meeting(conn)

            race_class = (await conn.execute(select(Race.race_class))).scalar_one()
            card_class = (await conn.execute(select(PreRace.race_class))).scalar_one()

        assert race_class == "1"
        assert card_class == "Class 1"

    @pytest.mark.asyncio
    async def test_null_race_class_stays_null(self, target_engine):
        async with target_engine.connect() as conn:
            await create_tables(conn)
            await write_meeting(conn, race_class=None)

            race_class = (await conn.execute(select(Race.race_class))).scalar_one()

        assert race_class is None
