from sqlalchemy import Column, Integer, String
from models.base import Base


class Horse(Base):
    """
    A racehorse with its historical weight and rating figures.
    
    All performance columns are optional; a NULL means the figure was
    never recorded and is kept distinct from zero.
    """
    __tablename__ = "horses"
    
    horse_id = Column(Integer, primary_key=True, autoincrement=True)
    horse = Column(String(255), nullable=False, unique=True)
    
    last_win_id = Column(Integer, nullable=True)
    highest_win_weight = Column(Integer, nullable=True, server_default="0")
    last_win_weight = Column(Integer, nullable=True, server_default="0")
    last_run_weight = Column(Integer, nullable=True, server_default="0")
    last_win_claim = Column(Integer, nullable=True, server_default="0")
    last_run_claim = Column(Integer, nullable=True, server_default="0")
    highest_win_or = Column(Integer, nullable=True, server_default="0")
