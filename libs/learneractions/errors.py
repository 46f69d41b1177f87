"""Exception types raised by the learner action codec.

Payload and envelope shape problems surface as `pydantic.ValidationError`;
the types here cover failures pydantic has no notion of.
"""

import json
from typing import Any


class LearnerActionError(Exception):
    """Base class for learner action errors."""


class UnknownActionTypeError(LearnerActionError, ValueError):
    """A backend dict's `action_type` is not one of the known learner action types.

    Signals corrupt data or a wire format newer than this build understands.
    The offending dict is kept on `backend_dict` for diagnostics.
    """

    def __init__(self, backend_dict: Any) -> None:
        self.backend_dict = backend_dict
        super().__init__(
            "Backend dict does not match any known action type: "
            + json.dumps(backend_dict, default=repr)
        )
