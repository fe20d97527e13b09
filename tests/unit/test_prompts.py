"""
Unit tests for prompt composition and plan sizing.

The composer only builds strings, so these tests assert on sections
being present, absent, or in order.
"""

import json
from datetime import date

import pytest

from pillarcoach.core.coaching import persona
from pillarcoach.core.coaching.directives import compile_directive
from pillarcoach.core.coaching.models import (
    Actionable,
    CoachingContext,
    CoachingModel,
    EmpathyLevel,
    Intensity,
    PlanningIntensity,
    PromptConfig,
)
from pillarcoach.core.coaching.planning import (
    intensity_parameters,
    planned_total_tasks,
    planning_preferences,
)
from pillarcoach.core.coaching.prompts import (
    EXPLICIT_MODEL_REASONING,
    SerializationError,
    build_actionable_instruction_pair,
    build_conversational_instruction,
    build_conversational_request,
    selection_input_from_context,
    target_task_count,
)


# ---------------------------------------------------------------------------
# Conversational Instruction
# ---------------------------------------------------------------------------

class TestConversationalInstruction:
    """Tests for build_conversational_instruction."""

    def test_contains_persona_block(self):
        text = build_conversational_instruction()

        for principle in persona.CORE_PRINCIPLES:
            assert principle in text
        for memory in persona.MEMORY_FRAGMENTS:
            assert memory in text
        assert "STEFANS KVALITETSSTANDARD" in text

    def test_sections_in_fixed_order(self, habit_context):
        text = build_conversational_instruction(habit_context)

        order = [
            "STEFANS KÄRNIDENTITET",
            "VALD COACHINGMODELL",
            "KONTEXTUELL MEDVETENHET",
            "KOMMUNIKATIONSRIKTLINJER",
            "PERSONALISERING",
            "STEFANS KVALITETSSTANDARD",
        ]
        positions = [text.index(label) for label in order]
        assert positions == sorted(positions)

    def test_model_classified_from_context(self, habit_context):
        text = build_conversational_instruction(habit_context)

        assert "VALD COACHINGMODELL: Neuroplastisk Metod" in text
        assert compile_directive(CoachingModel.NEUROPLASTIC).text in text

    def test_explicit_model_overrides_classification(self, habit_context):
        config = PromptConfig(coaching_model=CoachingModel.MINDFULNESS)

        text = build_conversational_instruction(habit_context, config)

        assert "VALD COACHINGMODELL: Mindfulness-baserad Coaching" in text
        assert EXPLICIT_MODEL_REASONING in text

    def test_present_context_fields_are_listed(self, habit_context):
        text = build_conversational_instruction(habit_context)

        assert "• Pillar-fokus: self_care" in text
        assert "• Aktuella utmaningar: sluta snusa, sover dåligt" in text
        assert "• Användarens mål: må bättre" in text

    def test_absent_context_fields_are_omitted(self):
        text = build_conversational_instruction(CoachingContext(user_goals=["må bättre"]))

        assert "• Pillar-fokus:" not in text
        assert "• Aktuella utmaningar:" not in text
        assert "• Användarens mål: må bättre" in text
        assert "None" not in text

    def test_empty_context_omits_awareness_section(self):
        assert "KONTEXTUELL MEDVETENHET" not in build_conversational_instruction(CoachingContext())

    def test_unserializable_assessment_raises(self):
        """Assessment data feeds model selection, so it must be valid JSON."""
        context = CoachingContext(assessment_data={"when": date(2024, 1, 1)})

        with pytest.raises(SerializationError, match="assessment data"):
            build_conversational_instruction(context)

    def test_header_names_the_persona(self):
        text = build_conversational_instruction()
        assert text.startswith(f"🎭 DU ÄR {persona.PERSONA_NAME.upper()} - ")

    def test_empty_context_still_gets_a_model_block(self):
        """The default selection text matches the adaptive model."""
        text = build_conversational_instruction(CoachingContext())
        assert "VALD COACHINGMODELL: Adaptiv AI-coaching" in text

    @pytest.mark.parametrize("level", list(EmpathyLevel))
    def test_empathy_level_sentence(self, level):
        text = build_conversational_instruction(config=PromptConfig(empathy_level=level))
        assert f"Empatinivå: {level.value} - {persona.EMPATHY_DESCRIPTIONS[level]}" in text

    @pytest.mark.parametrize("intensity", list(Intensity))
    def test_intensity_sentence(self, intensity):
        text = build_conversational_instruction(config=PromptConfig(intensity=intensity))
        assert f"Intensitet: {intensity.value} - {persona.INTENSITY_DESCRIPTIONS[intensity]}" in text

    def test_personal_touch_can_be_limited(self):
        text = build_conversational_instruction(config=PromptConfig(personal_touch=False))
        assert "Personlig touch: Begränsad" in text

    def test_identical_arguments_give_identical_text(self, habit_context):
        config = PromptConfig(intensity=Intensity.CHALLENGING)
        assert build_conversational_instruction(habit_context, config) == build_conversational_instruction(
            habit_context, config
        )


# ---------------------------------------------------------------------------
# Conversational Request
# ---------------------------------------------------------------------------

class TestConversationalRequest:
    """Tests for build_conversational_request."""

    def test_includes_request_and_tasks(self):
        text = build_conversational_request("Hur kommer jag igång?")

        assert text.startswith("COACHING-FÖRFRÅGAN:\nHur kommer jag igång?")
        assert "1. Möter personen där hen är just nu" in text
        assert "PERSONLIG KONTEXT" not in text

    def test_history_limited_to_last_three(self):
        context = CoachingContext(user_history=["a", "b", "c", "d"])

        text = build_conversational_request("Hej", context)

        assert "Historik: b, c, d" in text

    def test_assessment_data_is_serialized(self):
        context = CoachingContext(assessment_data={"sömn": 3})

        text = build_conversational_request("Hej", context)

        assert '"sömn": 3' in text

    def test_unserializable_assessment_raises(self):
        context = CoachingContext(assessment_data={"score": float("nan")})

        with pytest.raises(SerializationError):
            build_conversational_request("Hej", context)


# ---------------------------------------------------------------------------
# Actionable Prompt Pair
# ---------------------------------------------------------------------------

class TestActionableInstructionPair:
    """Tests for build_actionable_instruction_pair."""

    @pytest.mark.parametrize("requested,expected", [(1, 3), (20, 8), (5, 5), (None, 5), (0, 5)])
    def test_target_count_is_clamped(self, requested, expected):
        preferences = {} if requested is None else {"total_tasks": requested}

        pair = build_actionable_instruction_pair({}, preferences, CoachingContext())

        assert pair.target_count == expected
        assert f"Skapa {expected} personliga" in pair.user_text

    def test_camel_case_total_tasks_accepted(self):
        assert target_task_count({"totalTasks": 7}) == 7

    @pytest.mark.parametrize("requested", ["många", float("inf"), float("nan"), [4], {"n": 4}, True])
    def test_non_numeric_total_tasks_uses_default(self, requested):
        """Garbage in the count does not break prompt building."""
        assert target_task_count({"total_tasks": requested}) == 5

    def test_numeric_string_total_tasks_is_parsed(self):
        assert target_task_count({"total_tasks": "7"}) == 7

    @pytest.mark.parametrize("preferences", [None, [], "x", 3])
    def test_non_mapping_preferences_use_default(self, preferences):
        assert target_task_count(preferences) == 5

    def test_invalid_total_tasks_still_builds_pair(self):
        pair = build_actionable_instruction_pair({}, {"total_tasks": "många"}, CoachingContext())

        assert pair.target_count == 5
        assert "Skapa 5 personliga" in pair.user_text
        assert '"total_tasks": "många"' in pair.user_text

    def test_user_text_embeds_inputs(self, habit_context):
        assessment = {"score": 4, "kommentar": "trött"}
        preferences = {"total_tasks": 4, "intensity": "moderate"}

        pair = build_actionable_instruction_pair(assessment, preferences, habit_context)

        assert json.dumps(assessment, indent=2, ensure_ascii=False) in pair.user_text
        assert json.dumps(preferences, indent=2, ensure_ascii=False) in pair.user_text
        assert '"pillarType": "self_care"' in pair.user_text

    def test_user_text_states_field_contract(self):
        pair = build_actionable_instruction_pair({}, {}, CoachingContext())

        for name in Actionable.field_names():
            assert f'"{name}":' in pair.user_text
        assert '"easy|medium|hard"' in pair.user_text

    def test_system_text_carries_philosophy_and_model(self, habit_context):
        pair = build_actionable_instruction_pair({}, {}, habit_context)

        assert pair.selection.primary == CoachingModel.NEUROPLASTIC
        assert "ACTIONABLE-FILOSOFI" in pair.system_text
        for principle in persona.ACTIONABLE_PRINCIPLES:
            assert principle in pair.system_text
        assert compile_directive(CoachingModel.NEUROPLASTIC).text in pair.system_text

    def test_unserializable_assessment_raises(self):
        with pytest.raises(SerializationError, match="assessment data"):
            build_actionable_instruction_pair({"when": date(2024, 1, 1)}, {}, CoachingContext())

    def test_nan_is_not_valid_json(self):
        with pytest.raises(SerializationError):
            build_actionable_instruction_pair({"score": float("nan")}, {}, CoachingContext())

    def test_unserializable_context_raises(self):
        context = CoachingContext(assessment_data={"blob": object()})

        with pytest.raises(SerializationError):
            build_actionable_instruction_pair({}, {}, context)

    def test_identical_arguments_give_identical_pair(self, habit_context):
        first = build_actionable_instruction_pair({"a": 1}, {"total_tasks": 6}, habit_context)
        second = build_actionable_instruction_pair({"a": 1}, {"total_tasks": 6}, habit_context)

        assert first == second


# ---------------------------------------------------------------------------
# Selection Input
# ---------------------------------------------------------------------------

class TestSelectionInput:
    """Tests for selection_input_from_context."""

    def test_empty_context_uses_default_text(self):
        assert selection_input_from_context(CoachingContext()) == "allmän coaching"

    def test_challenges_goals_then_assessment(self):
        context = CoachingContext(
            current_challenges=["stress"],
            user_goals=["balans"],
            assessment_data={"k": "v"},
        )

        assert selection_input_from_context(context) == 'stress balans {"k": "v"}'


# ---------------------------------------------------------------------------
# Plan Sizing
# ---------------------------------------------------------------------------

class TestPlanning:
    """Tests for intensity-based plan sizing."""

    def test_intensity_parameters(self):
        params = intensity_parameters(PlanningIntensity.MODERATE)

        assert params.tasks_per_week == 4
        assert params.duration_display == "15-30 min"

    def test_total_tasks_capped_at_eight(self):
        assert planned_total_tasks(PlanningIntensity.CHILL, 2) == 4
        assert planned_total_tasks(PlanningIntensity.INTENSE, 4) == 8

    def test_duration_must_be_positive(self):
        with pytest.raises(ValueError, match="at least one week"):
            planned_total_tasks(PlanningIntensity.CHILL, 0)

    def test_planning_preferences_feed_target_count(self):
        preferences = planning_preferences(PlanningIntensity.CHILL, 1)

        assert preferences["total_tasks"] == 2
        assert preferences["task_duration"] == "5-15 min"
        assert target_task_count(preferences) == 3
