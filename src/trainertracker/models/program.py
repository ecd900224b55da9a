from datetime import date, datetime

from sqlalchemy import Float, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from trainertracker.database import Base


class Program(Base):
    __tablename__ = "programs"

    id: Mapped[int] = mapped_column(primary_key=True)
    trainer_id: Mapped[int] = mapped_column(ForeignKey("trainers.id"))
    client_id: Mapped[int] = mapped_column(ForeignKey("clients.id"))
    name: Mapped[str] = mapped_column(String(200))
    opt_phase: Mapped[str] = mapped_column(
        String(40), default="STABILIZATION_ENDURANCE"
    )  # one of the five OPT phases
    status: Mapped[str] = mapped_column(String(20), default="active")  # active, completed
    start_date: Mapped[date | None] = mapped_column(default=None)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)


class ExercisePerformance(Base):
    __tablename__ = "exercise_performances"

    id: Mapped[int] = mapped_column(primary_key=True)
    program_id: Mapped[int] = mapped_column(ForeignKey("programs.id"), index=True)
    session_id: Mapped[int | None] = mapped_column(ForeignKey("sessions.id"), default=None)
    exercise_id: Mapped[str] = mapped_column(String(100))
    exercise_name: Mapped[str] = mapped_column(String(200))
    performed_on: Mapped[date]
    weight: Mapped[float] = mapped_column(Float, default=0.0)
    reps: Mapped[int] = mapped_column(default=0)
    sets: Mapped[int] = mapped_column(default=0)
    rpe: Mapped[float] = mapped_column(Float, default=7.0)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
