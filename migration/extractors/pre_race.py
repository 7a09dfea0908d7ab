"""
Pre-race card extractor
"""

from typing import Any, Mapping

from migration.base import EntityExtractor
from migration.transformers import fmt_date, fmt_time, null_float, null_str, raw_json
from models import PreRace
from models import source
from schemas.rows import PreRaceRow


class PreRaceExtractor(EntityExtractor):
    """
    Copy pre-race cards.
    
    The runner list is JSON text and is handed to the target exactly as
    read; it is never parsed here.
    """
    
    name = "pre_race"
    model = PreRace
    source_table = source.pre_race
    depends_on = ("courses", "races")
    
    def transform(self, record: Mapping[str, Any]) -> PreRaceRow:
        return PreRaceRow(
            id=record["id"],
            runners=raw_json(record["runners"]),
            course=null_str(record["course"]),
            course_id=record["courseID"],
            date=fmt_date(record["date"]),
            time=fmt_time(record["time"]),
            race_id=record["raceID"],
            direction=null_str(record["direction"]),
            distance=null_float(record["distance"]),
            race_class=null_str(record["class"]),
            url=null_str(record["url"]),
        )
