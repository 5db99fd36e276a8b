from sqlalchemy import Column, Integer, String
from app.database.base import Base
from app.models.common import TimestampMixin

class Project(TimestampMixin, Base):
    __tablename__ = "project"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
    description = Column(String(500), nullable=True)

    # Assigned teams live in the project_team table (app.models.common).

    def __repr__(self):
        return f"<Project id={self.id} name={self.name!r}>"
