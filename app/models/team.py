from sqlalchemy import Column, Integer, String, ForeignKey
from app.database.base import Base
from app.models.common import TimestampMixin

class Team(TimestampMixin, Base):
    __tablename__ = "team"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
    description = Column(String(500), nullable=True)

    # Members and projects are read through app.repositories, keyed by team id.

    def __repr__(self):
        return f"<Team id={self.id} name={self.name!r}>"

class TeamMember(TimestampMixin, Base):
    __tablename__ = "team_member"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, nullable=False, index=True)
    role = Column(String(50), nullable=True)

    # Owning side of Team -> members. NULL means unassigned.
    team_id = Column(Integer, ForeignKey("team.id"), nullable=True, index=True)

    def __repr__(self):
        return f"<TeamMember id={self.id} email={self.email!r} team_id={self.team_id}>"
