"""Team model for the local store catalog."""

from sqlalchemy import Column, Integer, String

from src.database import Base


class Team(Base):
    """A club or national team whose jerseys are sold in the store."""

    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
    logo_url = Column(String(255), nullable=True)
