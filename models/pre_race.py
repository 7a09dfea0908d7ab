from sqlalchemy import Column, Float, ForeignKey, Integer, String, UniqueConstraint
from models.base import Base
from models.types import IsoDate, RawJSON


class PreRace(Base):
    """
    Pre-race card for a race.
    
    ``runners`` is the declared field list as JSON text; it is stored
    without being parsed. At most one card per race.
    """
    __tablename__ = "pre_race"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    runners = Column(RawJSON, nullable=False)
    course = Column(String(255), nullable=False)
    course_id = Column(Integer, ForeignKey("courses.course_id"), nullable=False)
    date = Column(IsoDate, nullable=False)
    time = Column(String(10), nullable=False)
    race_id = Column(Integer, ForeignKey("races.race_id"), nullable=False)
    direction = Column(String(50), nullable=False)
    distance = Column(Float, nullable=False)
    race_class = Column("class", String(50), key="race_class", nullable=False)
    url = Column(String(2048), nullable=False)
    
    __table_args__ = (
        UniqueConstraint("race_id", name="pre_race_no_dupes"),
    )
