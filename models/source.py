"""
Legacy source schema (MySQL ``rpData``).

Declared with SQLAlchemy Core so extractors can build their SELECTs from
real column objects. Column names keep the legacy camelCase spelling.
Nothing here is ever created or written by the migration; tests use
``source_metadata.create_all`` to build a stand-in source database.
"""

from sqlalchemy import Boolean, Column, Date, Float, Integer, MetaData, String, Table, Text

from models.types import RawJSON

source_metadata = MetaData()


users = Table(
    "users",
    source_metadata,
    Column("id", Integer, primary_key=True),
    Column("username", String(255), nullable=False),
    Column("password", String(255), nullable=False),
)

courses = Table(
    "courses",
    source_metadata,
    Column("courseID", Integer, primary_key=True),
    Column("course", String(255), nullable=False),
    Column("direction", String(50), nullable=False),
    Column("isAw", Boolean, nullable=False),
    Column("code", String(10), nullable=False),
)

horses = Table(
    "horses",
    source_metadata,
    Column("horseID", Integer, primary_key=True),
    Column("horse", String(255), nullable=False),
    Column("lastWinID", Integer),
    Column("highestWinWeight", Integer),
    Column("lastWinWeight", Integer),
    Column("lastRunWeight", Integer),
    Column("lastWinClaim", Integer),
    Column("lastRunClaim", Integer),
    Column("highestWinOr", Integer),
)

trainers = Table(
    "trainers",
    source_metadata,
    Column("trainerID", Integer, primary_key=True),
    Column("trainer", String(255), nullable=False),
    Column("info", Text),
)

races = Table(
    "races",
    source_metadata,
    Column("raceID", Integer, primary_key=True),
    Column("courseID", Integer, nullable=False),
    Column("date", Date, nullable=False),
    Column("time", String(10), nullable=False),
    Column("url", String(2048), nullable=False),
    Column("class", String(50)),
    Column("distance", Float, nullable=False),
    Column("going", String(100), nullable=False),
    Column("mr", Integer),
    Column("mr2", Integer),
    Column("analysed", Boolean, nullable=False),
    Column("preDone", Boolean, nullable=False),
    Column("mainComment", Text),
    Column("amended", Boolean, nullable=False),
)

pre_race = Table(
    "preRace",
    source_metadata,
    Column("id", Integer, primary_key=True),
    Column("runners", RawJSON, nullable=False),
    Column("course", String(255), nullable=False),
    Column("courseID", Integer, nullable=False),
    Column("date", Date, nullable=False),
    Column("time", String(10), nullable=False),
    Column("raceID", Integer, nullable=False),
    Column("direction", String(50), nullable=False),
    Column("distance", Float, nullable=False),
    Column("class", String(50), nullable=False),
    Column("url", String(2048), nullable=False),
)

results = Table(
    "results",
    source_metadata,
    Column("id", Integer, primary_key=True),
    Column("horseID", Integer, nullable=False),
    Column("courseID", Integer, nullable=False),
    Column("raceID", Integer, nullable=False),
    Column("age", Integer, nullable=False),
    Column("price", String(20), nullable=False),
    Column("trainer", String(255), nullable=False),
    Column("jockey", String(255), nullable=False),
    Column("number", Integer, nullable=False),
    Column("headgear", String(20)),
    Column("placed", String(10), nullable=False),
    Column("pace", String(50)),
    Column("officialRat", Integer),
    Column("winDist", Float),
    Column("distBehindWinner", Float),
    Column("weightCarried", Integer, nullable=False),
    Column("cardWeight", Integer, nullable=False),
    Column("claim", Integer),
    Column("rpr", Integer),
    Column("ts", Integer),
    Column("mrPlusOr", Integer),
    Column("mr2PlusOr", Integer),
    Column("wCmr2PlusOr", Integer),
    Column("wCmr1PlusOr", Integer),
    Column("totRPR", Integer),
    Column("tfr", String(50)),
    Column("tfsf", Integer),
    Column("tfsfMinusOr", Integer),
    Column("secT", Float),
    Column("speedPer", Float),
    Column("comment", Text),
    Column("analysed", Boolean, nullable=False),
)

intermediary = Table(
    "intermediary",
    source_metadata,
    Column("id", Integer, primary_key=True),
    Column("horseID", Integer, nullable=False),
    Column("raceID", Integer, nullable=False),
    Column("mrPlusOr", Integer),
    Column("tfr", String(50)),
)
