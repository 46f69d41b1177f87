"""Unit tests for the learner action factory."""

import pytest
from pydantic import ValidationError

from learneractions import (
    AnswerSubmitCustomizationArgs,
    ExplorationQuitCustomizationArgs,
    ExplorationStartCustomizationArgs,
    LearnerActionType,
    constants,
    create_action,
    create_answer_submit_action,
    create_exploration_quit_action,
    create_exploration_start_action,
)


class TestCreateAction:
    def test_with_pydantic_model(self):
        action = create_action(
            LearnerActionType.EXPLORATION_START,
            ExplorationStartCustomizationArgs(state_name="Introduction"),
        )
        assert action.action_type == LearnerActionType.EXPLORATION_START
        assert action.customization_args == ExplorationStartCustomizationArgs(
            state_name="Introduction"
        )
        assert action.schema_version == constants.LEARNER_ACTION_SCHEMA_LATEST_VERSION

    def test_with_dict_args(self):
        action = create_action(
            LearnerActionType.EXPLORATION_QUIT,
            {"state_name": "End", "time_spent_in_state_in_msecs": 300},
        )
        assert isinstance(action.customization_args, ExplorationQuitCustomizationArgs)
        assert action.customization_args.time_spent_in_state_in_msecs == 300

    def test_with_string_type(self):
        action = create_action("ExplorationStart", {"state_name": "Intro"})
        assert action.action_type is LearnerActionType.EXPLORATION_START

    def test_stamps_latest_version(self, latest_version):
        for action_type, args in [
            (LearnerActionType.EXPLORATION_START, {"state_name": "A"}),
            (
                LearnerActionType.EXPLORATION_QUIT,
                {"state_name": "A", "time_spent_in_state_in_msecs": 1},
            ),
        ]:
            assert create_action(action_type, args).schema_version == latest_version

    def test_missing_field_named(self):
        with pytest.raises(ValidationError, match="time_spent_in_state_in_msecs"):
            create_action(LearnerActionType.EXPLORATION_QUIT, {"state_name": "End"})

    def test_extra_field_named(self):
        with pytest.raises(ValidationError, match="feedback"):
            create_action(
                LearnerActionType.EXPLORATION_START,
                {"state_name": "Intro", "feedback": "Nice"},
            )

    def test_model_of_other_type_rejected(self):
        with pytest.raises(ValidationError):
            create_action(
                LearnerActionType.EXPLORATION_START,
                ExplorationQuitCustomizationArgs(
                    state_name="End", time_spent_in_state_in_msecs=1
                ),
            )

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError):
            create_action("Bogus", {"state_name": "Intro"})

    def test_string_time_rejected(self):
        with pytest.raises(ValidationError, match="time_spent_in_state_in_msecs"):
            create_action(
                LearnerActionType.EXPLORATION_QUIT,
                {"state_name": "End", "time_spent_in_state_in_msecs": "12"},
            )

    def test_bool_time_rejected(self):
        with pytest.raises(ValidationError, match="time_spent_state_in_msecs"):
            create_answer_submit_action(
                state_name="S1",
                dest_state_name="S2",
                interaction_id="TextInput",
                submitted_answer="42",
                feedback="Good",
                time_spent_state_in_msecs=True,
            )

    def test_int_state_name_rejected(self):
        with pytest.raises(ValidationError, match="state_name"):
            create_action(LearnerActionType.EXPLORATION_START, {"state_name": 7})

    def test_int_time_kept_as_int(self):
        action = create_exploration_quit_action(
            state_name="End", time_spent_in_state_in_msecs=300
        )
        assert type(action.customization_args.time_spent_in_state_in_msecs) is int


class TestPerTypeFactories:
    def test_exploration_start(self):
        action = create_exploration_start_action(state_name="Introduction")
        assert action.action_type == LearnerActionType.EXPLORATION_START
        assert action.customization_args.state_name == "Introduction"
        assert action.schema_version == constants.LEARNER_ACTION_SCHEMA_LATEST_VERSION

    def test_answer_submit(self, latest_version):
        action = create_answer_submit_action(
            state_name="S1",
            dest_state_name="S2",
            interaction_id="TextInput",
            submitted_answer="42",
            feedback="Good",
            time_spent_state_in_msecs=1500,
        )
        assert action.action_type == LearnerActionType.ANSWER_SUBMIT
        assert isinstance(action.customization_args, AnswerSubmitCustomizationArgs)
        assert action.customization_args.dest_state_name == "S2"
        assert action.schema_version == latest_version

    def test_exploration_quit(self):
        action = create_exploration_quit_action(
            state_name="End", time_spent_in_state_in_msecs=42.5
        )
        assert action.action_type == LearnerActionType.EXPLORATION_QUIT
        assert action.customization_args.time_spent_in_state_in_msecs == 42.5
