from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .base import Base


class Institution(Base):
    __tablename__ = "institutions"

    institution_id = Column(String(64), primary_key=True)
    name = Column(String(255), nullable=False, unique=True)
    short_name = Column(String(64))
    website = Column(String(255))
    description = Column(Text)
    address = Column(String(255))
    type = Column(String(32))        # UNIVERSITY / COLLEGE / ...
    ownership = Column(String(32))   # PUBLIC / PRIVATE
    established_year = Column(Integer)
    logo_url = Column(String(512))

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    units = relationship("Unit", back_populates="institution")
