"""Backend dict validation utilities."""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from learneractions.errors import UnknownActionTypeError
from learneractions.helpers.codec import action_type_of
from learneractions.models.actions import PAYLOAD_REGISTRY
from learneractions.models.backend_dict import LearnerActionBackendDict


def validate_backend_dict(data: Any) -> list[str]:
    """Validate a backend dict without decoding it.

    Returns a list of error strings. Empty list means `from_backend_dict`
    would accept it.
    """
    errors: list[str] = []

    # action_type must be a known LearnerActionType
    try:
        action_type = action_type_of(data)
    except UnknownActionTypeError:
        if isinstance(data, Mapping):
            errors.append(f"Unknown action type: {data.get('action_type')!r}")
        else:
            errors.append(f"Backend dict must be an object, got {type(data).__name__}")
        return errors

    # envelope must have wrapped args and a positive schema version
    try:
        backend_dict = LearnerActionBackendDict.model_validate(data)
    except ValidationError as e:
        for err in e.errors():
            loc = ".".join(str(x) for x in err["loc"])
            errors.append(f"{loc}: {err['msg']}")
        return errors

    # unwrapped args must match the schema for this action type
    model_class = PAYLOAD_REGISTRY[action_type]
    try:
        model_class.model_validate(backend_dict.unwrapped_args())
    except ValidationError as e:
        for err in e.errors():
            loc = ".".join(str(x) for x in err["loc"])
            errors.append(f"action_customization_args.{loc}: {err['msg']}")

    return errors
