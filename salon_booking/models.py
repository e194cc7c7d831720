from sqlalchemy import JSON, Column, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.sql import func

from .database import Base


class Record(Base):
    """One JSON record of an entity collection (users, services, appointments, ...)"""

    __tablename__ = "records"
    __table_args__ = (UniqueConstraint("entity", "record_id", name="uq_records_entity_record_id"),)

    # Surrogate key keeps insertion order stable for list()
    seq = Column(Integer, primary_key=True, autoincrement=True)
    entity = Column(String(50), index=True, nullable=False)
    record_id = Column(String(64), nullable=False)
    data = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
