"""Conversion between LearnerAction and its backend dict (wire) form."""

import json
import logging
from collections.abc import Mapping
from typing import Any, assert_never

from learneractions.errors import UnknownActionTypeError
from learneractions.models.actions import (
    AnswerSubmitCustomizationArgs,
    ExplorationQuitCustomizationArgs,
    ExplorationStartCustomizationArgs,
    LearnerAction,
    LearnerActionType,
)
from learneractions.models.backend_dict import LearnerActionBackendDict

logger = logging.getLogger(__name__)


def to_backend_dict(action: LearnerAction) -> dict[str, Any]:
    """Serialize an action to its backend dict, wrapping each arg as `{"value": ...}`."""
    return {
        "action_type": action.action_type.value,
        "action_customization_args": {
            name: {"value": value}
            for name, value in action.customization_args.model_dump().items()
        },
        "schema_version": action.schema_version,
    }


def action_to_json(action: LearnerAction) -> str:
    """Serialize an action to a JSON string of its backend dict."""
    return json.dumps(to_backend_dict(action), sort_keys=True)


def action_type_of(data: Any) -> LearnerActionType:
    """Return the known action type named by a backend dict.

    Raises:
        UnknownActionTypeError: If `data` is not a mapping, has no
            `action_type`, or names a type this build doesn't know.
    """
    if not isinstance(data, Mapping):
        raise UnknownActionTypeError(data)
    try:
        return LearnerActionType(data.get("action_type"))
    except ValueError:
        raise UnknownActionTypeError(dict(data)) from None


def from_backend_dict(data: Any) -> LearnerAction:
    """Rebuild a LearnerAction from its backend dict.

    The persisted `schema_version` is kept as is, never re-stamped.

    Args:
        data: A dict in the backend dict shape.

    Returns:
        The decoded LearnerAction.

    Raises:
        UnknownActionTypeError: If `action_type` is missing or unknown.
        pydantic.ValidationError: If the envelope or the customization args
            don't match the action type (including unwrapped args).
    """
    action_type = action_type_of(data)
    backend_dict = LearnerActionBackendDict.model_validate(data)
    args = backend_dict.unwrapped_args()

    match action_type:
        case LearnerActionType.EXPLORATION_START:
            customization_args = ExplorationStartCustomizationArgs.model_validate(args)
        case LearnerActionType.ANSWER_SUBMIT:
            customization_args = AnswerSubmitCustomizationArgs.model_validate(args)
        case LearnerActionType.EXPLORATION_QUIT:
            customization_args = ExplorationQuitCustomizationArgs.model_validate(args)
        case _:
            assert_never(action_type)

    logger.debug(
        "Decoded %s action (schema v%d)", action_type, backend_dict.schema_version
    )
    return LearnerAction(
        action_type=action_type,
        customization_args=customization_args,
        schema_version=backend_dict.schema_version,
    )


def parse_action(data: str | bytes | dict[str, Any]) -> LearnerAction:
    """Parse raw data into a LearnerAction.

    Args:
        data: JSON string, bytes, or dict.

    Returns:
        The decoded LearnerAction.

    Raises:
        ValueError: If the data isn't valid JSON.
        UnknownActionTypeError: If the action type is missing or unknown.
        pydantic.ValidationError: If the data doesn't match the backend dict schema.
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    if isinstance(data, str):
        data = json.loads(data)
    return from_backend_dict(data)
