"""
Plan sizing for actionable generation.

A user picks a pace (chill, moderate, intense) and a duration in weeks.
The pace decides tasks per week and task length; the product is capped
because fewer, stronger tasks beat a long list.
"""

from .models import IntensityParameters, PlanningIntensity
from .prompts import MAX_TOTAL_TASKS

INTENSITY_PARAMETERS: dict[PlanningIntensity, IntensityParameters] = {
    PlanningIntensity.CHILL: IntensityParameters(
        tasks_per_week=2,
        min_duration=5,
        max_duration=15,
        complexity="basic",
        stress_level="minimal",
    ),
    PlanningIntensity.MODERATE: IntensityParameters(
        tasks_per_week=4,
        min_duration=15,
        max_duration=30,
        complexity="intermediate",
        stress_level="moderate",
    ),
    PlanningIntensity.INTENSE: IntensityParameters(
        tasks_per_week=6,
        min_duration=30,
        max_duration=60,
        complexity="advanced",
        stress_level="challenging",
    ),
}


def intensity_parameters(intensity: PlanningIntensity) -> IntensityParameters:
    return INTENSITY_PARAMETERS[intensity]


def planned_total_tasks(intensity: PlanningIntensity, duration_weeks: int) -> int:
    """Tasks for the whole plan, never more than MAX_TOTAL_TASKS."""
    if duration_weeks < 1:
        raise ValueError("Plan duration must be at least one week")
    return min(intensity_parameters(intensity).tasks_per_week * duration_weeks, MAX_TOTAL_TASKS)


def planning_preferences(intensity: PlanningIntensity, duration_weeks: int) -> dict[str, object]:
    """
    Preferences dict ready for build_actionable_instruction_pair.

    Mirrors what the planning screen sends: the raw choices plus the
    derived sizing.
    """
    params = intensity_parameters(intensity)
    return {
        "intensity": intensity.value,
        "duration": duration_weeks,
        "tasks_per_week": params.tasks_per_week,
        "min_duration": params.min_duration,
        "max_duration": params.max_duration,
        "task_duration": params.duration_display,
        "total_tasks": planned_total_tasks(intensity, duration_weeks),
    }
