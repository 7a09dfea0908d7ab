"""
Pytest configuration and fixtures
"""

import pytest
import pytest_asyncio
from datetime import date
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from core.config import MigrationConfig
from core.database import create_target_engine
from models import source

# Deliberately unusual spacing and key order; must survive the copy untouched
RUNNERS_JSON = '{"runners":[{"horse": "Kauto Star","number":1},  {"number":2,"horse":"Denman"}]}'

SOURCE_ROWS = [
    (source.users, [
        {"id": 1, "username": "padraic", "password": "$2a$10$abcdefghijklmnopqrstuv"},
    ]),
    (source.courses, [
        {"courseID": 1, "course": "Ascot", "direction": "Right-handed", "isAw": False, "code": "ASC"},
        {"courseID": 2, "course": "Dundalk", "direction": "Left-handed", "isAw": True, "code": "DUN"},
    ]),
    (source.horses, [
        {
            "horseID": 10, "horse": "Kauto Star", "lastWinID": 100,
            "highestWinWeight": 160, "lastWinWeight": 158, "lastRunWeight": 158,
            "lastWinClaim": 0, "lastRunClaim": 0, "highestWinOr": 135,
        },
        {
            "horseID": 11, "horse": "Denman", "lastWinID": None,
            "highestWinWeight": None, "lastWinWeight": None, "lastRunWeight": None,
            "lastWinClaim": None, "lastRunClaim": None, "highestWinOr": None,
        },
    ]),
    (source.trainers, [
        {"trainerID": 1, "trainer": "Paul Nicholls", "info": "Ditcheat"},
        {"trainerID": 2, "trainer": "Willie Mullins", "info": None},
    ]),
    (source.races, [
        {
            "raceID": 100, "courseID": 1, "date": date(2024, 6, 18), "time": "14:30",
            "url": "https://www.racingpost.com/results/2/ascot/2024-06-18/100",
            "class": "1", "distance": 8.0, "going": "Good to Firm", "mr": 110, "mr2": None,
            "analysed": True, "preDone": False, "mainComment": None, "amended": False,
        },
        {
            "raceID": 101, "courseID": 2, "date": date(2024, 1, 5), "time": "19:00",
            "url": "https://www.racingpost.com/results/1138/dundalk-aw/2024-01-05/101",
            "class": None, "distance": 7.0, "going": "Standard", "mr": None, "mr2": None,
            "analysed": False, "preDone": False, "mainComment": "Slowly away", "amended": False,
        },
        {
            "raceID": 102, "courseID": 1, "date": date(2024, 6, 19), "time": "15:05",
            "url": "https://www.racingpost.com/results/2/ascot/2024-06-19/102",
            "class": "2", "distance": 12.0, "going": "Good", "mr": 95, "mr2": 97,
            "analysed": False, "preDone": True, "mainComment": None, "amended": True,
        },
    ]),
    (source.pre_race, [
        {
            "id": 1, "runners": RUNNERS_JSON, "course": "Ascot", "courseID": 1,
            "date": date(2024, 6, 18), "time": "14:30", "raceID": 100,
            "direction": "Right-handed", "distance": 8.0, "class": "1",
            "url": "https://www.racingpost.com/racecards/2/ascot/2024-06-18/100",
        },
    ]),
    (source.results, [
        {
            "id": 1000, "horseID": 10, "courseID": 1, "raceID": 100, "age": 7,
            "price": "4/1", "trainer": "Paul Nicholls", "jockey": "Ruby Walsh", "number": 1,
            "headgear": "t", "placed": "1", "pace": "Led", "officialRat": 135,
            "winDist": 2.5, "distBehindWinner": 0.0, "weightCarried": 158, "cardWeight": 158,
            "claim": 0, "rpr": 140, "ts": 120, "mrPlusOr": 245, "mr2PlusOr": None,
            "wCmr2PlusOr": None, "wCmr1PlusOr": 250, "totRPR": 280, "tfr": "138",
            "tfsf": 130, "tfsfMinusOr": -5, "secT": 101.25, "speedPer": 99.5,
            "comment": "Made all", "analysed": True,
        },
        {
            "id": 1001, "horseID": 11, "courseID": 1, "raceID": 100, "age": 8,
            "price": "11/8F", "trainer": "Paul Nicholls", "jockey": "Sam Thomas", "number": 2,
            "headgear": None, "placed": "2", "pace": None, "officialRat": None,
            "winDist": None, "distBehindWinner": 2.5, "weightCarried": 160, "cardWeight": 160,
            "claim": None, "rpr": None, "ts": None, "mrPlusOr": None, "mr2PlusOr": None,
            "wCmr2PlusOr": None, "wCmr1PlusOr": None, "totRPR": None, "tfr": None,
            "tfsf": None, "tfsfMinusOr": None, "secT": None, "speedPer": None,
            "comment": None, "analysed": False,
        },
    ]),
    (source.intermediary, [
        {"id": 1, "horseID": 10, "raceID": 100, "mrPlusOr": 245, "tfr": "138"},
        {"id": 2, "horseID": 11, "raceID": 100, "mrPlusOr": None, "tfr": None},
    ]),
]

EXPECTED_COUNTS = {
    "users": 1,
    "courses": 2,
    "horses": 2,
    "trainers": 2,
    "races": 3,
    "pre_race": 1,
    "results": 2,
    "intermediary": 2,
}


@pytest.fixture
def source_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'source.db'}"


@pytest.fixture
def target_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'target.db'}"


async def seed_source(url: str) -> None:
    """Create a legacy-shaped source database holding a small race meeting"""
    engine = create_async_engine(url, echo=False, poolclass=NullPool)

    try:
        async with engine.begin() as conn:
            await conn.run_sync(source.source_metadata.create_all)
            for table, rows in SOURCE_ROWS:
                await conn.execute(insert(table), rows)
    finally:
        await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def source_db(source_url):
    await seed_source(source_url)
    yield source_url


@pytest_asyncio.fixture(scope="function")
async def target_engine(target_url):
    """Engine on the target database (tables are created by the run)"""
    engine = create_target_engine(target_url)
    yield engine
    await engine.dispose()


@pytest.fixture
def migration_config(source_db, source_url, target_url):
    """Config for a run against the seeded source; small batches force several flushes"""
    return MigrationConfig(
        source_url=source_url,
        target_url=target_url,
        batch_size=2,
    )
