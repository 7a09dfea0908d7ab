"""
Trainers extractor
"""

from typing import Any, Mapping

from migration.base import EntityExtractor
from migration.transformers import null_str
from models import Trainer
from models import source
from schemas.rows import TrainerRow


class TrainersExtractor(EntityExtractor):
    name = "trainers"
    model = Trainer
    source_table = source.trainers
    
    def transform(self, record: Mapping[str, Any]) -> TrainerRow:
        return TrainerRow(
            trainer_id=record["trainerID"],
            trainer=null_str(record["trainer"]),
            info=null_str(record["info"]),
        )
