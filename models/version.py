from sqlalchemy import Column, Integer, DateTime
from datetime import datetime
from models.base import Base


class FnddsVersion(Base):
    """
    One row per loaded FNDDS release.

    Purpose:
    - Records which releases are present in the destination
    - Anchors every entity row through version_id
    - created marks the most recent load; a reload replaces the row
    """
    __tablename__ = "fndds_version"

    id = Column(Integer, primary_key=True, autoincrement=False)

    begin_year = Column(Integer, nullable=False)
    end_year = Column(Integer, nullable=False)
    major = Column(Integer, nullable=False)
    minor = Column(Integer, nullable=False)

    created = Column(DateTime, nullable=False, default=datetime.utcnow)
