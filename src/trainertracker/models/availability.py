from datetime import date, datetime

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from trainertracker.database import Base


class WeeklyAvailability(Base):
    __tablename__ = "weekly_availabilities"

    id: Mapped[int] = mapped_column(primary_key=True)
    trainer_id: Mapped[int] = mapped_column(ForeignKey("trainers.id"))
    day_of_week: Mapped[int]  # 0=Sunday, 6=Saturday
    start_time: Mapped[str] = mapped_column(String(5))  # HH:MM
    end_time: Mapped[str] = mapped_column(String(5))  # HH:MM
    is_available: Mapped[bool] = mapped_column(default=True)
    max_sessions_per_day: Mapped[int] = mapped_column(default=8)
    in_person: Mapped[bool] = mapped_column(default=True)
    virtual: Mapped[bool] = mapped_column(default=True)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)


class AvailabilityException(Base):
    __tablename__ = "availability_exceptions"

    id: Mapped[int] = mapped_column(primary_key=True)
    trainer_id: Mapped[int] = mapped_column(ForeignKey("trainers.id"))
    date: Mapped[date]
    is_available: Mapped[bool] = mapped_column(default=False)
    start_time: Mapped[str | None] = mapped_column(String(5), default=None)  # overrides rule start
    end_time: Mapped[str | None] = mapped_column(String(5), default=None)  # overrides rule end
    reason: Mapped[str | None] = mapped_column(Text, default=None)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
