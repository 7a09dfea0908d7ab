from sqlalchemy import Boolean, Column, Float, ForeignKey, Integer, String, Text, UniqueConstraint, false
from models.base import Base
from models.types import IsoDate


class Race(Base):
    """
    A single race at a course.
    
    One race per (course, date, off time).
    """
    __tablename__ = "races"
    
    race_id = Column(Integer, primary_key=True, autoincrement=True)
    course_id = Column(Integer, ForeignKey("courses.course_id"), nullable=False)
    date = Column(IsoDate, nullable=False)
    time = Column(String(10), nullable=False)
    url = Column(String(2048), nullable=False)
    race_class = Column("class", String(50), key="race_class", nullable=True)
    distance = Column(Float, nullable=False)
    going = Column(String(100), nullable=False)
    
    # Race ratings
    mr = Column(Integer, nullable=True)
    mr2 = Column(Integer, nullable=True)
    
    # Workflow flags
    analysed = Column(Boolean, nullable=False, server_default=false())
    pre_done = Column(Boolean, nullable=False, server_default=false())
    main_comment = Column(Text, nullable=True)
    amended = Column(Boolean, nullable=False, server_default=false())
    
    __table_args__ = (
        UniqueConstraint("course_id", "date", "time", name="races_no_dupes"),
    )
