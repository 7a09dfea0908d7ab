"""
Per-entity extractors, listed in load order.

Identity entities (users, courses, horses, trainers) come first, then
races, then everything that hangs off a race.
"""

from typing import List

from migration.base import EntityExtractor
from migration.batching import DEFAULT_BATCH_SIZE
from migration.extractors.users import UsersExtractor
from migration.extractors.courses import CoursesExtractor
from migration.extractors.horses import HorsesExtractor
from migration.extractors.trainers import TrainersExtractor
from migration.extractors.races import RacesExtractor
from migration.extractors.pre_race import PreRaceExtractor
from migration.extractors.results import ResultsExtractor
from migration.extractors.intermediary import IntermediaryExtractor

EXTRACTOR_CLASSES = (
    UsersExtractor,
    CoursesExtractor,
    HorsesExtractor,
    TrainersExtractor,
    RacesExtractor,
    PreRaceExtractor,
    ResultsExtractor,
    IntermediaryExtractor,
)


def default_extractors(batch_size: int = DEFAULT_BATCH_SIZE) -> List[EntityExtractor]:
    """One extractor per entity, in dependency order"""
    return [cls(batch_size=batch_size) for cls in EXTRACTOR_CLASSES]


__all__ = [
    "EXTRACTOR_CLASSES",
    "default_extractors",
    "UsersExtractor",
    "CoursesExtractor",
    "HorsesExtractor",
    "TrainersExtractor",
    "RacesExtractor",
    "PreRaceExtractor",
    "ResultsExtractor",
    "IntermediaryExtractor",
]
