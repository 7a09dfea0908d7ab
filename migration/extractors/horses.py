"""
Horses extractor
"""

from typing import Any, Mapping

from migration.base import EntityExtractor
from migration.transformers import null_int, null_str
from models import Horse
from models import source
from schemas.rows import HorseRow


class HorsesExtractor(EntityExtractor):
    """
    Copy horses with their historical figures.
    
    Every figure is optional; NULL stays NULL rather than falling back to
    the target column's default of 0.
    """
    
    name = "horses"
    model = Horse
    source_table = source.horses
    
    def transform(self, record: Mapping[str, Any]) -> HorseRow:
        return HorseRow(
            horse_id=record["horseID"],
            horse=null_str(record["horse"]),
            last_win_id=null_int(record["lastWinID"]),
            highest_win_weight=null_int(record["highestWinWeight"]),
            last_win_weight=null_int(record["lastWinWeight"]),
            last_run_weight=null_int(record["lastRunWeight"]),
            last_win_claim=null_int(record["lastWinClaim"]),
            last_run_claim=null_int(record["lastRunClaim"]),
            highest_win_or=null_int(record["highestWinOr"]),
        )
