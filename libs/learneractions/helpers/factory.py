"""Factory functions for creating fresh learner actions."""

import logging
from typing import Any

from pydantic import BaseModel

from learneractions import constants
from learneractions.models.actions import (
    PAYLOAD_REGISTRY,
    AnswerSubmitCustomizationArgs,
    ExplorationQuitCustomizationArgs,
    ExplorationStartCustomizationArgs,
    LearnerAction,
    LearnerActionType,
)

logger = logging.getLogger(__name__)


def create_action(
    action_type: LearnerActionType,
    customization_args: BaseModel | dict[str, Any],
) -> LearnerAction:
    """Create a LearnerAction stamped with the latest schema version.

    Args:
        action_type: The learner action type.
        customization_args: A customization-args model instance or a plain dict.

    Returns:
        A fully constructed LearnerAction.

    Raises:
        pydantic.ValidationError: If the args don't match the action type's model
            (missing, extra or wrongly typed fields).
    """
    action_type = LearnerActionType(action_type)
    model_class = PAYLOAD_REGISTRY[action_type]
    if isinstance(customization_args, model_class):
        args = customization_args
    elif isinstance(customization_args, BaseModel):
        args = model_class.model_validate(customization_args.model_dump())
    else:
        args = model_class.model_validate(customization_args)

    action = LearnerAction(
        action_type=action_type,
        customization_args=args,
        schema_version=constants.LEARNER_ACTION_SCHEMA_LATEST_VERSION,
    )
    logger.debug("Created %s action (schema v%d)", action_type, action.schema_version)
    return action


def create_exploration_start_action(*, state_name: str) -> LearnerAction:
    """Create an ExplorationStart action."""
    return create_action(
        LearnerActionType.EXPLORATION_START,
        ExplorationStartCustomizationArgs(state_name=state_name),
    )


def create_answer_submit_action(
    *,
    state_name: str,
    dest_state_name: str,
    interaction_id: str,
    submitted_answer: str,
    feedback: str,
    time_spent_state_in_msecs: float,
) -> LearnerAction:
    """Create an AnswerSubmit action."""
    return create_action(
        LearnerActionType.ANSWER_SUBMIT,
        AnswerSubmitCustomizationArgs(
            state_name=state_name,
            dest_state_name=dest_state_name,
            interaction_id=interaction_id,
            submitted_answer=submitted_answer,
            feedback=feedback,
            time_spent_state_in_msecs=time_spent_state_in_msecs,
        ),
    )


def create_exploration_quit_action(
    *, state_name: str, time_spent_in_state_in_msecs: float
) -> LearnerAction:
    """Create an ExplorationQuit action."""
    return create_action(
        LearnerActionType.EXPLORATION_QUIT,
        ExplorationQuitCustomizationArgs(
            state_name=state_name,
            time_spent_in_state_in_msecs=time_spent_in_state_in_msecs,
        ),
    )
