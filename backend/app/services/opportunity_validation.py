"""Business rules for posted and edited opportunities.

Type and enum checks happen in the pydantic schemas; the rules here need
the whole record or today's date.
"""

import re
from datetime import date
from typing import Any

from backend.app.core.errors import ValidationFailed, missing_fields_error
from backend.app.schemas.choices import US_STATES

REQUIRED_TEXT_FIELDS = (
    "opportunity_name",
    "category",
    "opportunity_type",
    "location_type",
    "application_deadline",
    "brief_description",
    "application_url",
    "contact_info",
)

URL_PATTERN = re.compile(r"^https?://.+", re.IGNORECASE)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def check_opportunity_rules(values: dict[str, Any], today: date, *, check_dates: set[str] | None = None) -> None:
    """Raise ``ValidationFailed`` for the first broken rule.

    ``check_dates`` limits the not-in-the-past checks to the given fields so
    an owner can edit an opportunity whose start date has already gone by.
    """
    missing = [name for name in REQUIRED_TEXT_FIELDS if _is_blank(values.get(name))]
    if missing:
        raise missing_fields_error(missing)

    dated = {"application_deadline", "start_date"} if check_dates is None else check_dates

    if values.get("location_type") in ("in_person", "hybrid") and _is_blank(values.get("location_address")):
        raise ValidationFailed(
            "Physical address is required for in-person and hybrid opportunities", ["location_address"]
        )

    state = values.get("location_state")
    if not _is_blank(state) and state not in US_STATES:
        raise ValidationFailed(f"Invalid US state code: {state}", ["location_state"])

    if "application_deadline" in dated and values["application_deadline"] < today:
        raise ValidationFailed("Application deadline must be in the future", ["application_deadline"])

    start_date = values.get("start_date")
    end_date = values.get("end_date")
    if start_date and "start_date" in dated and start_date < today:
        raise ValidationFailed("Start date must be in the future", ["start_date"])
    if start_date and end_date and end_date < start_date:
        raise ValidationFailed("End date must be after start date", ["end_date"])

    min_age = values.get("min_age")
    max_age = values.get("max_age")
    if min_age is not None and max_age is not None and max_age < min_age:
        raise ValidationFailed("Maximum age must be greater than or equal to minimum age", ["max_age"])

    if not URL_PATTERN.match(values["application_url"].strip()):
        raise ValidationFailed(
            "Application URL must be a valid URL starting with http:// or https://", ["application_url"]
        )


def normalize_opportunity_values(values: dict[str, Any]) -> dict[str, Any]:
    """Trim free text and turn empty optionals into nulls before saving."""
    normalized = dict(values)
    for name in ("opportunity_name", "brief_description", "application_url", "contact_info"):
        if isinstance(normalized.get(name), str):
            normalized[name] = normalized[name].strip()
    for name in ("location_address", "requirements_other", "location_state"):
        if name in normalized:
            value = normalized[name]
            normalized[name] = value.strip() if isinstance(value, str) and value.strip() else None
    if "grade_levels" in normalized and not normalized["grade_levels"]:
        normalized["grade_levels"] = None
    return normalized
