from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, String, Text, UniqueConstraint, false
from models.base import Base


class Result(Base):
    """
    Finishing data for one runner in one race.
    
    Rating and sectional columns are optional; they are only present for
    races that have been analysed.
    """
    __tablename__ = "results"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    horse_id = Column(Integer, ForeignKey("horses.horse_id"), nullable=False)
    course_id = Column(Integer, ForeignKey("courses.course_id"), nullable=False)
    race_id = Column(Integer, ForeignKey("races.race_id"), nullable=False)
    
    # Runner details
    age = Column(Integer, nullable=False)
    price = Column(String(20), nullable=False)
    trainer = Column(String(255), nullable=False)
    jockey = Column(String(255), nullable=False)
    number = Column(Integer, nullable=False)
    headgear = Column(String(20), nullable=True)
    placed = Column(String(10), nullable=False)
    pace = Column(String(50), nullable=True)
    official_rat = Column(Integer, nullable=True)
    win_dist = Column(Float, nullable=True)
    dist_behind_winner = Column(Float, nullable=True)
    weight_carried = Column(Integer, nullable=False)
    card_weight = Column(Integer, nullable=False)
    claim = Column(Integer, nullable=True)
    
    # Ratings
    rpr = Column(Integer, nullable=True)
    ts = Column(Integer, nullable=True)
    mr_plus_or = Column(Integer, nullable=True)
    mr2_plus_or = Column(Integer, nullable=True)
    wc_mr2_plus_or = Column(Integer, nullable=True)
    wc_mr1_plus_or = Column(Integer, nullable=True)
    tot_rpr = Column(Integer, nullable=True)
    tfr = Column(String(50), nullable=True)
    tfsf = Column(Integer, nullable=True)
    tfsf_minus_or = Column(Integer, nullable=True)
    
    # Sectionals
    sec_t = Column(Float, nullable=True)
    speed_per = Column(Float, nullable=True)
    
    comment = Column(Text, nullable=True)
    analysed = Column(Boolean, nullable=False, server_default=false())
    
    __table_args__ = (
        UniqueConstraint("race_id", "horse_id", name="results_no_dupes"),
    )
