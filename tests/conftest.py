"""Shared test fixtures."""

import pytest

from learneractions import constants


@pytest.fixture
def latest_version(monkeypatch: pytest.MonkeyPatch) -> int:
    """Pin the latest schema version to a value distinct from the default."""
    monkeypatch.setattr(constants, "LEARNER_ACTION_SCHEMA_LATEST_VERSION", 5)
    return 5


@pytest.fixture
def answer_submit_dict() -> dict:
    return {
        "action_type": "AnswerSubmit",
        "action_customization_args": {
            "state_name": {"value": "S1"},
            "dest_state_name": {"value": "S2"},
            "interaction_id": {"value": "TextInput"},
            "submitted_answer": {"value": "42"},
            "feedback": {"value": "Good"},
            "time_spent_state_in_msecs": {"value": 1500},
        },
        "schema_version": 1,
    }
