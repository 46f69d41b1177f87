"""Learner actions — tagged learner-interaction events and their wire codec."""

from learneractions.errors import LearnerActionError, UnknownActionTypeError
from learneractions.helpers.codec import (
    action_to_json,
    action_type_of,
    from_backend_dict,
    parse_action,
    to_backend_dict,
)
from learneractions.helpers.factory import (
    create_action,
    create_answer_submit_action,
    create_exploration_quit_action,
    create_exploration_start_action,
)
from learneractions.helpers.validation import validate_backend_dict
from learneractions.models.actions import (
    PAYLOAD_REGISTRY,
    AnswerSubmitCustomizationArgs,
    CustomizationArgs,
    ExplorationQuitCustomizationArgs,
    ExplorationStartCustomizationArgs,
    LearnerAction,
    LearnerActionType,
)
from learneractions.models.backend_dict import (
    CustomizationArgValue,
    LearnerActionBackendDict,
)

__all__ = [
    # Errors
    "LearnerActionError",
    "UnknownActionTypeError",
    # Models
    "AnswerSubmitCustomizationArgs",
    "CustomizationArgValue",
    "CustomizationArgs",
    "ExplorationQuitCustomizationArgs",
    "ExplorationStartCustomizationArgs",
    "LearnerAction",
    "LearnerActionBackendDict",
    "LearnerActionType",
    "PAYLOAD_REGISTRY",
    # Factory
    "create_action",
    "create_answer_submit_action",
    "create_exploration_quit_action",
    "create_exploration_start_action",
    # Codec
    "action_to_json",
    "action_type_of",
    "from_backend_dict",
    "parse_action",
    "to_backend_dict",
    "validate_backend_dict",
]
