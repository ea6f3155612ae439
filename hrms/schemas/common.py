from typing import Any, ClassVar, FrozenSet

from pydantic import BaseModel, ValidationInfo, field_validator


class PartialUpdate(BaseModel):
    """
    Base for PUT payloads. Omitted fields keep their stored value; an explicit
    null is only accepted for the columns listed in `nullable_fields`.
    """
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @field_validator("*", mode="before")
    @classmethod
    def reject_explicit_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name not in cls.nullable_fields:
            raise ValueError(f"{info.field_name} cannot be null; omit it to keep the current value")
        return value
