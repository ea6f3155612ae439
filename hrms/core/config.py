import os
import logging
from pydantic import BaseModel, Field
from typing import Dict, List
from dotenv import load_dotenv

load_dotenv()


# Annual day quota per leave type. Not persisted per employee.
DEFAULT_LEAVE_ALLOTMENTS: Dict[str, int] = {
    "Annual Leave": 20,
    "Sick Leave": 10,
    "Personal Leave": 5,
    "Unpaid Leave": 30,
}


class Config(BaseModel):
    app_name: str = "HRMS API"
    environment: str = os.getenv("APP_ENV", "development")
    api_prefix: str = "/api"
    version: str = "1.0.0"

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./hrms.db")

    # Observability
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    request_id_header: str = "X-Request-ID"

    # CORS: comma-separated origins loaded from env.
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            o.strip()
            for o in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:3000,http://localhost:5173,"
                "http://127.0.0.1:3000,http://127.0.0.1:5173",
            ).split(",")
            if o.strip()
        ]
    )

    # Business rules
    currency: str = os.getenv("CURRENCY", "AED")
    auto_recalculate_gratuity: bool = os.getenv("AUTO_RECALCULATE_GRATUITY", "true").lower() == "true"
    leave_allotments: Dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_LEAVE_ALLOTMENTS))


settings = Config()

_logger = logging.getLogger(__name__)
if settings.environment != "development" and settings.database_url.startswith("sqlite:///./"):
    _logger.warning("Using a local SQLite file outside development (%s).", settings.database_url)
