from productivepro.crud.completions import ToggleResult, reset_challenge, set_completion, toggle_completion
from productivepro.crud.habits import (
    archive_habit,
    create_habit,
    delete_habit,
    get_habit,
    list_habits,
    seed_demo_habits_if_empty,
    update_habit,
)
from productivepro.crud.snapshots import build_schedule, build_snapshot, get_completion_keys, schedule_for, selected_days_for

__all__ = [
    "create_habit",
    "get_habit",
    "list_habits",
    "update_habit",
    "archive_habit",
    "delete_habit",
    "seed_demo_habits_if_empty",
    "build_schedule",
    "build_snapshot",
    "schedule_for",
    "selected_days_for",
    "get_completion_keys",
    "ToggleResult",
    "toggle_completion",
    "set_completion",
    "reset_challenge",
]
