from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from models.base import Base


class Intermediary(Base):
    """Provisional MR+OR and TFR figures recorded before results exist"""
    __tablename__ = "intermediary"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    horse_id = Column(Integer, ForeignKey("horses.horse_id"), nullable=False)
    race_id = Column(Integer, ForeignKey("races.race_id"), nullable=False)
    mr_plus_or = Column(Integer, nullable=True)
    tfr = Column(String(50), nullable=True)
    
    __table_args__ = (
        UniqueConstraint("race_id", "horse_id", name="intermediary_no_dupes"),
    )
