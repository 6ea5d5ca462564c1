from productivepro.models.base import Base
from productivepro.models.habit import Habit
from productivepro.models.habit_completion import HabitCompletion

__all__ = [
    "Base",
    "Habit",
    "HabitCompletion",
]
