"""
Field rules for contact submissions and projects.

Each entity is described by an ordered tuple of ``FieldRule`` objects.
``validate`` walks the rules in that order and returns every
violation it finds (at most one per field), so the same payload always
yields the same list.  ``normalize`` keeps only declared fields and
fills in defaults.  Neither function knows anything about MongoDB.

"Required" follows the document store's own notion: the value must
be present, not ``None`` and not the empty string.  Whitespace is not
trimmed.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Pattern, Tuple

from ..core.exceptions import FieldViolation
from ..schemas.contact import CONTACT_STATUSES
from ..schemas.project import PROJECT_STATUSES

EMAIL_PATTERN = re.compile(r"^\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*(?:\.\w{2,3})+$", re.ASCII)

STRING = "string"
STRING_LIST = "string_list"


@dataclass(frozen=True)
class FieldRule:
    name: str
    kind: str = STRING
    required: bool = False
    required_message: str = ""
    max_length: Optional[int] = None
    max_length_message: str = ""
    pattern: Optional[Pattern[str]] = None
    pattern_message: str = ""
    choices: Optional[Tuple[str, ...]] = None
    default: Optional[Callable[[], Any]] = None


CONTACT_RULES: Tuple[FieldRule, ...] = (
    FieldRule(
        "fullName",
        required=True,
        required_message="Please provide your full name",
        max_length=100,
        max_length_message="Name cannot be more than 100 characters",
    ),
    FieldRule(
        "companyName",
        max_length=200,
        max_length_message="Company name cannot be more than 200 characters",
    ),
    FieldRule(
        "email",
        required=True,
        required_message="Please provide your email",
        pattern=EMAIL_PATTERN,
        pattern_message="Please provide a valid email address",
    ),
    FieldRule("projectType"),
    FieldRule(
        "message",
        required=True,
        required_message="Please provide a message",
        max_length=2000,
        max_length_message="Message cannot be more than 2000 characters",
    ),
    FieldRule("status", choices=CONTACT_STATUSES, default=lambda: "new"),
)

PROJECT_RULES: Tuple[FieldRule, ...] = (
    FieldRule(
        "title",
        required=True,
        required_message="Please provide a project title",
        max_length=200,
        max_length_message="Title cannot be more than 200 characters",
    ),
    FieldRule(
        "description",
        required=True,
        required_message="Please provide a project description",
    ),
    FieldRule(
        "category",
        required=True,
        required_message="Please provide a project category",
    ),
    FieldRule("image"),
    FieldRule("technologies", kind=STRING_LIST, default=list),
    FieldRule("link"),
    FieldRule("status", choices=PROJECT_STATUSES, default=lambda: "active"),
)


def _check(rule: FieldRule, value: Any) -> Optional[FieldViolation]:
    # An empty string means "absent" only for string fields.
    if value is None or (value == "" and rule.kind == STRING):
        if rule.required:
            return FieldViolation(rule.name, "required", rule.required_message or f"{rule.name} is required")
        if rule.choices is not None and value == "":
            return FieldViolation(rule.name, "enum", f"{rule.name} must be one of {', '.join(rule.choices)}")
        return None

    if rule.kind == STRING_LIST:
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            return FieldViolation(rule.name, "type", f"{rule.name} must be a list of strings")
        return None

    if not isinstance(value, str):
        return FieldViolation(rule.name, "type", f"{rule.name} must be a string")
    if rule.max_length is not None and len(value) > rule.max_length:
        return FieldViolation(
            rule.name,
            "max_length",
            rule.max_length_message or f"{rule.name} cannot be more than {rule.max_length} characters",
        )
    if rule.pattern is not None and not rule.pattern.fullmatch(value):
        return FieldViolation(rule.name, "pattern", rule.pattern_message or f"{rule.name} is malformed")
    if rule.choices is not None and value not in rule.choices:
        return FieldViolation(
            rule.name,
            "enum",
            f"'{value}' is not a valid {rule.name}; expected one of {', '.join(rule.choices)}",
        )
    return None


def normalize(rules: Tuple[FieldRule, ...], payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the declared fields of ``payload`` with defaults applied.

    Unknown keys are dropped.  Fields that are absent or ``None`` take
    their rule's default, or ``None`` when the rule has none.
    """
    record: Dict[str, Any] = {}
    for rule in rules:
        value = payload.get(rule.name)
        if value is None and rule.default is not None:
            value = rule.default()
        record[rule.name] = value
    return record


def validate(rules: Tuple[FieldRule, ...], record: Mapping[str, Any]) -> List[FieldViolation]:
    """Return all violations in ``record``, in rule order."""
    violations = []
    for rule in rules:
        violation = _check(rule, record.get(rule.name))
        if violation is not None:
            violations.append(violation)
    return violations


def validate_contact(payload: Mapping[str, Any]) -> List[FieldViolation]:
    return validate(CONTACT_RULES, normalize(CONTACT_RULES, payload))


def validate_project(payload: Mapping[str, Any]) -> List[FieldViolation]:
    return validate(PROJECT_RULES, normalize(PROJECT_RULES, payload))
