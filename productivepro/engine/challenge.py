from dataclasses import dataclass

from productivepro.engine.habit import HabitSnapshot
from productivepro.engine.math_utils import percent


@dataclass(frozen=True)
class ChallengeProgress:
    completed: int
    remaining: int
    percent: int


def challenge_progress(habit: HabitSnapshot) -> ChallengeProgress:
    # Non-challenge habits carry a zero duration and report zeros.
    duration = habit.challenge_duration_days
    if duration <= 0:
        return ChallengeProgress(completed=0, remaining=0, percent=0)

    completed = max(0, habit.challenge_completed_count)
    return ChallengeProgress(
        completed=completed,
        remaining=max(0, duration - completed),
        percent=percent(completed, duration),
    )
