"""SQLAlchemy Models"""
from dreamvacation.models.destination import Destination

__all__ = ["Destination"]
