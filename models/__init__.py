"""
SQLAlchemy models for the source and target databases.

Target models (ORM, created by the schema bootstrap):
    User, Course, Horse, Trainer, Race, PreRace, Result, Intermediary

Source schema (Core tables, read only):
    models.source: legacy MySQL tables with their camelCase columns

Column types:
    IsoDate: DATE column exchanged as a ``YYYY-MM-DD`` string
    RawJSON: JSON document stored without being parsed

Relationships:
    - Course → Race (one-to-many)
    - Race → PreRace (one-to-one)
    - Race, Horse → Result (one row per runner per race)
    - Race, Horse → Intermediary (one row per runner per race)

Usage:
    from models import Course, Race
    from models.base import Base
"""

from models.base import Base
from models.user import User
from models.course import Course
from models.horse import Horse
from models.trainer import Trainer
from models.race import Race
from models.pre_race import PreRace
from models.result import Result
from models.intermediary import Intermediary

__all__ = [
    "Base",
    "User",
    "Course",
    "Horse",
    "Trainer",
    "Race",
    "PreRace",
    "Result",
    "Intermediary",
]
