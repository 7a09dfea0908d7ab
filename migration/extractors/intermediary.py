"""
Intermediary ratings extractor
"""

from typing import Any, Mapping

from migration.base import EntityExtractor
from migration.transformers import null_int, null_str
from models import Intermediary
from models import source
from schemas.rows import IntermediaryRow


class IntermediaryExtractor(EntityExtractor):
    name = "intermediary"
    model = Intermediary
    source_table = source.intermediary
    depends_on = ("horses", "races")
    
    def transform(self, record: Mapping[str, Any]) -> IntermediaryRow:
        return IntermediaryRow(
            id=record["id"],
            horse_id=record["horseID"],
            race_id=record["raceID"],
            mr_plus_or=null_int(record["mrPlusOr"]),
            tfr=null_str(record["tfr"]),
        )
