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

__all__ = [
    "action_to_json",
    "action_type_of",
    "create_action",
    "create_answer_submit_action",
    "create_exploration_quit_action",
    "create_exploration_start_action",
    "from_backend_dict",
    "parse_action",
    "to_backend_dict",
    "validate_backend_dict",
]
