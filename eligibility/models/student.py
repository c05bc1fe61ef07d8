from sqlalchemy import Column, Integer, String, Float, DateTime
from sqlalchemy.sql import func

from .base import Base


class Student(Base):
    __tablename__ = "students"

    student_id = Column(String(64), primary_key=True)
    name = Column(String(255))
    email = Column(String(255), unique=True, index=True)

    # Academic profile
    ssc_gpa = Column(Float)
    hsc_gpa = Column(Float)
    ssc_stream = Column(String(16))   # SCIENCE / ARTS / COMMERCE
    hsc_stream = Column(String(16))
    ssc_year = Column(Integer)
    hsc_year = Column(Integer)
    exam_path = Column(String(32))

    created_at = Column(DateTime(timezone=True), server_default=func.now())
