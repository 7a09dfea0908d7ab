"""
Results extractor
"""

from typing import Any, Mapping

from migration.base import EntityExtractor
from migration.transformers import null_bool, null_float, null_int, null_str
from models import Result
from models import source
from schemas.rows import ResultRow


class ResultsExtractor(EntityExtractor):
    """Copy one result row per runner per race"""
    
    name = "results"
    model = Result
    source_table = source.results
    depends_on = ("courses", "horses", "races")
    
    def transform(self, record: Mapping[str, Any]) -> ResultRow:
        return ResultRow(
            id=record["id"],
            horse_id=record["horseID"],
            course_id=record["courseID"],
            race_id=record["raceID"],
            age=record["age"],
            price=null_str(record["price"]),
            trainer=null_str(record["trainer"]),
            jockey=null_str(record["jockey"]),
            number=record["number"],
            headgear=null_str(record["headgear"]),
            placed=null_str(record["placed"]),
            pace=null_str(record["pace"]),
            official_rat=null_int(record["officialRat"]),
            win_dist=null_float(record["winDist"]),
            dist_behind_winner=null_float(record["distBehindWinner"]),
            weight_carried=record["weightCarried"],
            card_weight=record["cardWeight"],
            claim=null_int(record["claim"]),
            rpr=null_int(record["rpr"]),
            ts=null_int(record["ts"]),
            mr_plus_or=null_int(record["mrPlusOr"]),
            mr2_plus_or=null_int(record["mr2PlusOr"]),
            wc_mr2_plus_or=null_int(record["wCmr2PlusOr"]),
            wc_mr1_plus_or=null_int(record["wCmr1PlusOr"]),
            tot_rpr=null_int(record["totRPR"]),
            tfr=null_str(record["tfr"]),
            tfsf=null_int(record["tfsf"]),
            tfsf_minus_or=null_int(record["tfsfMinusOr"]),
            sec_t=null_float(record["secT"]),
            speed_per=null_float(record["speedPer"]),
            comment=null_str(record["comment"]),
            analysed=null_bool(record["analysed"]),
        )
