"""Backend dict models — the wire format learner actions are persisted in."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CustomizationArgValue(BaseModel):
    """One wrapped customization arg: `{"value": <field>}`."""

    model_config = ConfigDict(extra="forbid")

    value: Any


class LearnerActionBackendDict(BaseModel):
    """The wire shape of a learner action.

    `action_type` is kept as a plain string here; mapping it onto a known
    type is the codec's job. Every customization arg must be wrapped, a bare
    `"state_name": "Intro"` is rejected.
    """

    model_config = ConfigDict(extra="forbid")

    action_type: str
    action_customization_args: dict[str, CustomizationArgValue]
    schema_version: int = Field(ge=1, strict=True)

    def unwrapped_args(self) -> dict[str, Any]:
        """Return the customization args with their `{"value": ...}` wrappers stripped."""
        return {
            name: arg.value for name, arg in self.action_customization_args.items()
        }
