from datetime import datetime

from pydantic import BaseModel, Field, field_validator

SESSION_STATUS_PATTERN = r"^(scheduled|completed|cancelled|no_show)$"


class TrainingSessionBase(BaseModel):
    client_id: int
    start_time: datetime
    end_time: datetime | None = None  # defaults to start + 60 minutes
    type: str | None = Field(default=None, max_length=50)
    location: str | None = Field(default=None, max_length=200)
    notes: str | None = None


class TrainingSessionCreate(TrainingSessionBase):
    pass


class TrainingSessionUpdate(BaseModel):
    start_time: datetime | None = None
    end_time: datetime | None = None
    status: str | None = Field(default=None, pattern=SESSION_STATUS_PATTERN)
    type: str | None = Field(default=None, max_length=50)
    location: str | None = Field(default=None, max_length=200)
    notes: str | None = None

    @field_validator("status")
    @classmethod
    def _status_not_null(cls, value: str | None) -> str | None:
        # Only reached for an explicit null; an omitted field is not validated
        if value is None:
            raise ValueError("status cannot be null")
        return value


class TrainingSessionRead(TrainingSessionBase):
    id: int
    trainer_id: int
    status: str
    created_at: datetime

    model_config = {"from_attributes": True}


class SessionConflictRead(BaseModel):
    id: int
    client_id: int
    start_time: datetime
    end_time: datetime | None = None

    model_config = {"from_attributes": True}
