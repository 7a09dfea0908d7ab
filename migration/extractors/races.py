"""
Races extractor
"""

from typing import Any, Mapping

from migration.base import EntityExtractor
from migration.transformers import fmt_date, fmt_time, null_bool, null_float, null_int, null_str
from models import Race
from models import source
from schemas.rows import RaceRow


class RacesExtractor(EntityExtractor):
    """Copy races; the race date is written as ``YYYY-MM-DD``"""
    
    name = "races"
    model = Race
    source_table = source.races
    depends_on = ("courses",)
    
    def transform(self, record: Mapping[str, Any]) -> RaceRow:
        return RaceRow(
            race_id=record["raceID"],
            course_id=record["courseID"],
            date=fmt_date(record["date"]),
            time=fmt_time(record["time"]),
            url=null_str(record["url"]),
            race_class=null_str(record["class"]),
            distance=null_float(record["distance"]),
            going=null_str(record["going"]),
            mr=null_int(record["mr"]),
            mr2=null_int(record["mr2"]),
            analysed=null_bool(record["analysed"]),
            pre_done=null_bool(record["preDone"]),
            main_comment=null_str(record["mainComment"]),
            amended=null_bool(record["amended"]),
        )
