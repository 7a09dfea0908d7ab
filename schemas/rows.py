"""
Pydantic schemas for target-shaped rows.

Each schema mirrors one target table column for column (field names are
the ORM column keys). Optional fields are ``None`` when the source value
was NULL; they never default to zero or an empty string.

Validation here is what turns a malformed source value into a decode
error for the extractor that produced it.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class TargetRow(BaseModel):
    """Base for all migrated rows"""
    
    model_config = ConfigDict(extra="forbid")
    
    def to_insert_params(self) -> dict:
        """Column values for a bulk INSERT, NULLs included"""
        return self.model_dump()


class UserRow(TargetRow):
    id: int
    username: str = Field(..., min_length=1, max_length=255)
    password: str


class CourseRow(TargetRow):
    course_id: int
    course: str = Field(..., min_length=1, max_length=255)
    direction: str
    is_aw: bool
    code: str


class HorseRow(TargetRow):
    horse_id: int
    horse: str = Field(..., min_length=1, max_length=255)
    last_win_id: Optional[int] = None
    highest_win_weight: Optional[int] = None
    last_win_weight: Optional[int] = None
    last_run_weight: Optional[int] = None
    last_win_claim: Optional[int] = None
    last_run_claim: Optional[int] = None
    highest_win_or: Optional[int] = None


class TrainerRow(TargetRow):
    trainer_id: int
    trainer: str = Field(..., min_length=1, max_length=255)
    info: Optional[str] = None


class RaceRow(TargetRow):
    race_id: int
    course_id: int
    date: str = Field(..., pattern=ISO_DATE_PATTERN)
    time: str
    url: str
    race_class: Optional[str] = None
    distance: float
    going: str
    mr: Optional[int] = None
    mr2: Optional[int] = None
    analysed: bool
    pre_done: bool
    main_comment: Optional[str] = None
    amended: bool


class PreRaceRow(TargetRow):
    id: int
    runners: str
    course: str
    course_id: int
    date: str = Field(..., pattern=ISO_DATE_PATTERN)
    time: str
    race_id: int
    direction: str
    distance: float
    race_class: str
    url: str


class ResultRow(TargetRow):
    id: int
    horse_id: int
    course_id: int
    race_id: int
    age: int
    price: str
    trainer: str
    jockey: str
    number: int
    headgear: Optional[str] = None
    placed: str
    pace: Optional[str] = None
    official_rat: Optional[int] = None
    win_dist: Optional[float] = None
    dist_behind_winner: Optional[float] = None
    weight_carried: int
    card_weight: int
    claim: Optional[int] = None
    rpr: Optional[int] = None
    ts: Optional[int] = None
    mr_plus_or: Optional[int] = None
    mr2_plus_or: Optional[int] = None
    wc_mr2_plus_or: Optional[int] = None
    wc_mr1_plus_or: Optional[int] = None
    tot_rpr: Optional[int] = None
    tfr: Optional[str] = None
    tfsf: Optional[int] = None
    tfsf_minus_or: Optional[int] = None
    sec_t: Optional[float] = None
    speed_per: Optional[float] = None
    comment: Optional[str] = None
    analysed: bool


class IntermediaryRow(TargetRow):
    id: int
    horse_id: int
    race_id: int
    mr_plus_or: Optional[int] = None
    tfr: Optional[str] = None
