"""
Coaching-model selection and prompt composition.

Contains the model lexicon, the classifier, the directive compiler and
the prompt composer.
"""

from .classifier import classify, score_models
from .directives import compile_directive
from .lexicon import (
    PILLAR_BONUSES,
    UnknownModelReference,
    all_models,
    definition_of,
    pillar_bonuses,
)
from .models import (
    Actionable,
    ActionablePromptPair,
    CoachingContext,
    CoachingModel,
    ContextAwareness,
    Difficulty,
    Directive,
    EmpathyLevel,
    Intensity,
    IntensityParameters,
    ModelDefinition,
    ModelSelection,
    PlanningIntensity,
    Priority,
    PromptConfig,
)
from .planning import intensity_parameters, planned_total_tasks, planning_preferences
from .prompts import (
    SerializationError,
    actionable_contract,
    build_actionable_instruction_pair,
    build_conversational_instruction,
    build_conversational_request,
    selection_input_from_context,
    target_task_count,
)

__all__ = [
    "Actionable",
    "ActionablePromptPair",
    "CoachingContext",
    "CoachingModel",
    "ContextAwareness",
    "Difficulty",
    "Directive",
    "EmpathyLevel",
    "Intensity",
    "IntensityParameters",
    "ModelDefinition",
    "ModelSelection",
    "PlanningIntensity",
    "Priority",
    "PromptConfig",
    "PILLAR_BONUSES",
    "SerializationError",
    "UnknownModelReference",
    "actionable_contract",
    "all_models",
    "build_actionable_instruction_pair",
    "build_conversational_instruction",
    "build_conversational_request",
    "classify",
    "compile_directive",
    "definition_of",
    "intensity_parameters",
    "pillar_bonuses",
    "planned_total_tasks",
    "planning_preferences",
    "score_models",
    "selection_input_from_context",
    "target_task_count",
]
