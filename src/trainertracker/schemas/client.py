from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class ClientBase(BaseModel):
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    email: EmailStr | None = None
    experience_level: str = Field(
        default="beginner", pattern=r"^(beginner|intermediate|advanced)$"
    )
    goals: str | None = None


class ClientCreate(ClientBase):
    pass


class ClientRead(ClientBase):
    id: int
    trainer_id: int
    created_at: datetime

    model_config = {"from_attributes": True}
