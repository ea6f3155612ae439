from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from hrms.database import Base


class Vehicle(Base):
    """Company fleet. A vehicle may be assigned to one employee as its driver."""
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, index=True)
    make = Column(String, default="Unknown", nullable=False)
    model = Column(String, nullable=False)
    year = Column(String, nullable=True)
    plate_number = Column(String, unique=True, nullable=False)
    type = Column(String, default="car", nullable=False)  # car, truck, bike, van
    status = Column(String, default="active", nullable=False)  # active, maintenance, out_of_service
    next_service = Column(Date, nullable=True)
    assigned_driver_id = Column(Integer, ForeignKey("employees.id", ondelete="SET NULL"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    driver = relationship("Employee")
