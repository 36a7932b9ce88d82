"""
User accounts and job applications.

Users are identified by username; the JWT ``sub`` claim carries it.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import relationship
from app.core.database import Base


# A user applies to a job at most once
applications = Table(
    "applications",
    Base.metadata,
    Column("username", String(25), ForeignKey("users.username", ondelete="CASCADE"), primary_key=True),
    Column("job_id", Integer, ForeignKey("jobs.id", ondelete="CASCADE"), primary_key=True),
)


class User(Base):
    __tablename__ = "users"

    username = Column(String(25), primary_key=True)
    hashed_password = Column(Text, nullable=False)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)

    # Relationships
    jobs = relationship("Job", secondary=applications, back_populates="applicants", order_by="Job.id")

    def __repr__(self):
        return f"<User(username='{self.username}', is_admin={self.is_admin})>"
