"""Student registration model."""

import uuid

from sqlalchemy import Column, DateTime, String, UniqueConstraint, Uuid

from ..core.database import Base
from ..utils.datetime import utcnow


class Student(Base):
    """A student registered for a cultural event."""

    __tablename__ = "students"
    __table_args__ = (
        UniqueConstraint("roll_number", name="students_roll_number_unique"),
    )

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    roll_number = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    event = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
