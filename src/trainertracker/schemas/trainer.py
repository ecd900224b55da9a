from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class TrainerBase(BaseModel):
    name: str = Field(max_length=100)
    email: EmailStr


class TrainerCreate(TrainerBase):
    pass


class TrainerRead(TrainerBase):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
