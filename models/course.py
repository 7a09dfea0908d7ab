from sqlalchemy import Boolean, Column, Integer, String
from models.base import Base


class Course(Base):
    """A racecourse"""
    __tablename__ = "courses"
    
    course_id = Column(Integer, primary_key=True, autoincrement=True)
    course = Column(String(255), nullable=False, unique=True)
    direction = Column(String(50), nullable=False)
    is_aw = Column(Boolean, nullable=False)  # all-weather surface
    code = Column(String(10), nullable=False)
