from sqlalchemy import Column, Integer, String, Float, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from hrms.database import Base
import enum


class AssetStatus(str, enum.Enum):
    AVAILABLE = "available"
    ASSIGNED = "assigned"
    MAINTENANCE = "maintenance"
    SCRAPPED = "scrapped"


class Asset(Base):
    __tablename__ = "assets"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    serial_number = Column(String, unique=True, nullable=True)
    type = Column(String, default="other", nullable=False)  # electronics, furniture, vehicle, other
    purchase_date = Column(Date, nullable=True)
    value = Column(Float, default=0.0, nullable=False)
    assigned_to = Column(Integer, ForeignKey("employees.id", ondelete="SET NULL"), nullable=True, index=True)
    status = Column(String, default=AssetStatus.AVAILABLE.value, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    employee = relationship("Employee")
