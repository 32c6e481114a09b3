from typing import Any, List

from ..errors import ValidationError

REQUIRED_PERSONAL_FIELDS = ("fullName", "email")
MISSING_REQUIRED_MESSAGE = "Full name and email are required"


def missing_required_fields(payload: Any) -> List[str]:
    """Returns the dotted paths of required fields that are absent or empty.

    Only presence is checked. Any truthy value passes, with no format rules
    for email or anything else.
    """
    personal_info = payload.get("personalInfo") if isinstance(payload, dict) else None
    if not isinstance(personal_info, dict):
        personal_info = {}
    return [
        f"personalInfo.{name}"
        for name in REQUIRED_PERSONAL_FIELDS
        if not personal_info.get(name)
    ]


def validate_resume_payload(payload: Any) -> None:
    missing = missing_required_fields(payload)
    if missing:
        raise ValidationError(MISSING_REQUIRED_MESSAGE, missing_fields=missing)
