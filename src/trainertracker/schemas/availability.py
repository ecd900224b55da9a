from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from trainertracker.scheduling.intervals import parse_time_of_day


def _check_time(value: str | None) -> str | None:
    if value is None:
        return None
    parse_time_of_day(value)
    return value


class WeeklyAvailabilityBase(BaseModel):
    day_of_week: int = Field(ge=0, le=6)  # 0=Sunday
    start_time: str
    end_time: str
    is_available: bool = True
    max_sessions_per_day: int = Field(default=8, ge=1)
    in_person: bool = True
    virtual: bool = True

    @field_validator("start_time", "end_time")
    @classmethod
    def _valid_time(cls, value: str) -> str:
        return _check_time(value)  # type: ignore[return-value]

    @model_validator(mode="after")
    def _ordered(self) -> "WeeklyAvailabilityBase":
        if parse_time_of_day(self.start_time) >= parse_time_of_day(self.end_time):
            raise ValueError("end_time must be after start_time")
        return self


class WeeklyAvailabilityCreate(WeeklyAvailabilityBase):
    pass


class WeeklyAvailabilityRead(WeeklyAvailabilityBase):
    id: int
    trainer_id: int
    created_at: datetime

    model_config = {"from_attributes": True}


class AvailabilityExceptionBase(BaseModel):
    date: date
    is_available: bool = False
    start_time: str | None = None
    end_time: str | None = None
    reason: str | None = None

    @field_validator("start_time", "end_time")
    @classmethod
    def _valid_time(cls, value: str | None) -> str | None:
        return _check_time(value)


class AvailabilityExceptionCreate(AvailabilityExceptionBase):
    pass


class AvailabilityExceptionRead(AvailabilityExceptionBase):
    id: int
    trainer_id: int
    created_at: datetime

    model_config = {"from_attributes": True}


class AvailabilityUpdate(BaseModel):
    """Full replacement of the weekly template, and of exceptions when given."""

    availabilities: list[WeeklyAvailabilityCreate] = Field(default_factory=list)
    exceptions: list[AvailabilityExceptionCreate] | None = None

    @model_validator(mode="after")
    def _one_rule_per_day(self) -> "AvailabilityUpdate":
        # Slot resolution reads a single window per weekday
        days = [rule.day_of_week for rule in self.availabilities]
        duplicates = sorted({day for day in days if days.count(day) > 1})
        if duplicates:
            raise ValueError(
                f"Only one availability window per day_of_week, got duplicates for {duplicates}"
            )
        return self


class AvailabilityRead(BaseModel):
    availabilities: list[WeeklyAvailabilityRead]
    exceptions: list[AvailabilityExceptionRead]


class TimeSlotRead(BaseModel):
    start_time: datetime
    end_time: datetime
    duration: int

    model_config = {"from_attributes": True}


class SlotsResponse(BaseModel):
    slots: list[TimeSlotRead]
