from datetime import datetime
from sqlalchemy import Column, Integer, ForeignKey, Table, DateTime
from app.database.base import Base

# Association Table for Project <-> Team
project_team = Table(
    "project_team",
    Base.metadata,
    Column("project_id", Integer, ForeignKey("project.id"), primary_key=True),
    Column("team_id", Integer, ForeignKey("team.id"), primary_key=True, index=True)
)

class TimestampMixin:
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def touch(self):
        """Refreshes updated_at even when no column value changed."""
        self.updated_at = datetime.utcnow()
