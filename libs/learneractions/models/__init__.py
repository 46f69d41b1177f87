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
    "AnswerSubmitCustomizationArgs",
    "CustomizationArgValue",
    "CustomizationArgs",
    "ExplorationQuitCustomizationArgs",
    "ExplorationStartCustomizationArgs",
    "LearnerAction",
    "LearnerActionBackendDict",
    "LearnerActionType",
    "PAYLOAD_REGISTRY",
]
