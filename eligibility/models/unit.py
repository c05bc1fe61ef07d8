from sqlalchemy import Column, Integer, String, Text, DateTime, Boolean, Float, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .base import Base


class Unit(Base):
    __tablename__ = "units"

    unit_id = Column(String(64), primary_key=True)
    institution_id = Column(String(64), ForeignKey("institutions.institution_id"), nullable=False, index=True)
    name = Column(String(50), nullable=False)
    description = Column(Text)

    is_active = Column(Boolean, default=True, nullable=False)
    application_deadline = Column(DateTime(timezone=True))
    auto_close_after_deadline = Column(Boolean, default=False, nullable=False)
    max_applications = Column(Integer)

    # Unit-level exam details (display only)
    exam_date = Column(DateTime(timezone=True))
    exam_time = Column(String(50))
    exam_center = Column(String(100))

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    institution = relationship("Institution", back_populates="units")
    requirements = relationship(
        "UnitRequirement",
        back_populates="unit",
        order_by="UnitRequirement.id",
        cascade="all, delete-orphan",
    )


class UnitRequirement(Base):
    __tablename__ = "unit_requirements"

    id = Column(Integer, primary_key=True, autoincrement=True)
    unit_id = Column(String(64), ForeignKey("units.unit_id", ondelete="CASCADE"), nullable=False, index=True)

    ssc_stream = Column(String(16), nullable=False)
    hsc_stream = Column(String(16), nullable=False)
    min_ssc_gpa = Column(Float)
    min_hsc_gpa = Column(Float)
    min_combined_gpa = Column(Float)
    min_ssc_year = Column(Integer)
    max_ssc_year = Column(Integer)
    min_hsc_year = Column(Integer)
    max_hsc_year = Column(Integer)

    unit = relationship("Unit", back_populates="requirements")
