"""
Destination Model
"""
from sqlalchemy import Column, Integer, BigInteger, String, DateTime, func

from dreamvacation.utils.database import Base

PLACEHOLDER_CAPITAL = "Unknown"
PLACEHOLDER_POPULATION = 0
PLACEHOLDER_REGION = "Unknown"


class Destination(Base):
    __tablename__ = "destinations"
    # AUTOINCREMENT keeps SQLite from reusing ids after deletes
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    country = Column(String(255), nullable=False)

    # Written as placeholders until enrichment exists
    capital = Column(String(255))
    population = Column(BigInteger)
    region = Column(String(255))

    vacation_type = Column(String(50), nullable=True)  # tropical, mountain, cultural

    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Destination {self.id} {self.country}>"
