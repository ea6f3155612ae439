"""
Company profile. The table holds at most one row; it is created with
defaults the first time it is read.
"""
from typing import Any, Dict

from sqlalchemy.orm import Session

from hrms.core.exceptions import InvalidArgumentError
from hrms.models.company_setting import CompanySetting
from hrms.services.base import BaseService, column_values


class CompanySettingsService(BaseService):
    def get(self) -> CompanySetting:
        record = self.db.query(CompanySetting).order_by(CompanySetting.id).first()
        if record is None:
            record = CompanySetting(company_name="My Company", timezone="UTC", work_start="09:00", work_end="17:00")
            self.db.add(record)
            self.commit()
            self.db.refresh(record)
            self.log_info("Created default company settings")
        return record

    def update(self, data: Dict[str, Any]) -> CompanySetting:
        record = self.get()
        for field, value in column_values(data).items():
            setattr(record, field, value)
        # Zero-padded HH:MM compares correctly as text
        if record.work_end <= record.work_start:
            self.db.rollback()
            raise InvalidArgumentError(
                "work_end must be after work_start",
                {"work_start": record.work_start, "work_end": record.work_end}
            )
        self.commit()
        self.db.refresh(record)
        return record
