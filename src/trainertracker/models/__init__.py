from trainertracker.models.availability import AvailabilityException, WeeklyAvailability
from trainertracker.models.client import Client
from trainertracker.models.program import ExercisePerformance, Program
from trainertracker.models.session import TrainingSession
from trainertracker.models.trainer import Trainer

__all__ = [
    "AvailabilityException",
    "Client",
    "ExercisePerformance",
    "Program",
    "Trainer",
    "TrainingSession",
    "WeeklyAvailability",
]
