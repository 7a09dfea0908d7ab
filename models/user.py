from sqlalchemy import Column, Integer, String
from models.base import Base


class User(Base):
    """API user; ``password`` holds a bcrypt hash, never plain text"""
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True)
    password = Column(String(255), nullable=False)
