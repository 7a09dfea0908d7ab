from sqlalchemy import Column, Integer, String, Text
from models.base import Base


class Trainer(Base):
    """Trainer name with optional free-text notes"""
    __tablename__ = "trainers"
    
    trainer_id = Column(Integer, primary_key=True, autoincrement=True)
    trainer = Column(String(255), nullable=False, unique=True)
    info = Column(Text, nullable=True)
