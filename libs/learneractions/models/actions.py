"""Learner action types, their customization-args models, and the action value type."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class LearnerActionType(StrEnum):
    """All learner action types recorded during an exploration."""

    EXPLORATION_START = "ExplorationStart"
    ANSWER_SUBMIT = "AnswerSubmit"
    EXPLORATION_QUIT = "ExplorationQuit"


class ExplorationStartCustomizationArgs(BaseModel):
    """Learner entered the exploration."""

    model_config = ConfigDict(extra="forbid", strict=True, validate_assignment=True)

    state_name: str


class AnswerSubmitCustomizationArgs(BaseModel):
    """Learner submitted an answer to a state's interaction."""

    model_config = ConfigDict(extra="forbid", strict=True, validate_assignment=True)

    state_name: str
    dest_state_name: str
    interaction_id: str
    submitted_answer: str
    feedback: str
    # Spelled differently from ExplorationQuit's key; both are wire contract
    time_spent_state_in_msecs: int | float


class ExplorationQuitCustomizationArgs(BaseModel):
    """Learner left the exploration without completing it."""

    model_config = ConfigDict(extra="forbid", strict=True, validate_assignment=True)

    state_name: str
    time_spent_in_state_in_msecs: int | float


CustomizationArgs = (
    ExplorationStartCustomizationArgs
    | AnswerSubmitCustomizationArgs
    | ExplorationQuitCustomizationArgs
)

# Registry mapping action types to their customization-args models
PAYLOAD_REGISTRY: dict[LearnerActionType, type[BaseModel]] = {
    LearnerActionType.EXPLORATION_START: ExplorationStartCustomizationArgs,
    LearnerActionType.ANSWER_SUBMIT: AnswerSubmitCustomizationArgs,
    LearnerActionType.EXPLORATION_QUIT: ExplorationQuitCustomizationArgs,
}


class LearnerAction(BaseModel):
    """A single recorded learner action.

    `action_type` and `schema_version` are fixed for the lifetime of the
    object. `customization_args` is a mutable reference: callers may change
    its fields in place, but not swap in a payload of another kind through
    the constructor.

    Build instances with the factory helpers (fresh actions) or
    `from_backend_dict` (persisted actions) rather than directly.
    """

    action_type: LearnerActionType = Field(frozen=True)
    customization_args: CustomizationArgs
    schema_version: int = Field(ge=1, frozen=True)

    @model_validator(mode="after")
    def _check_args_match_type(self) -> "LearnerAction":
        expected = PAYLOAD_REGISTRY[self.action_type]
        if type(self.customization_args) is not expected:
            raise ValueError(
                f"{self.action_type} action requires {expected.__name__}, "
                f"got {type(self.customization_args).__name__}"
            )
        return self
