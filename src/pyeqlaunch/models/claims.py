"""Launch token claim set."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class VariantFlags(BaseModel):
    """Free-text variant metadata grouped under ``variant_flags``."""

    model_config = ConfigDict(frozen=True)

    sexual_identity: str = ""


class EqClaims(BaseModel):
    """Claims carried inside a launch token.

    ``iat``, ``exp`` and ``jti`` are the registered JWT claims; the rest
    are survey runner metadata copied from the launch form. Dates such as
    ``ref_p_start_date`` are passed through as the strings submitted
    (normally ISO 8601) without validation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    iat: int
    exp: int
    jti: str

    user_id: str = ""
    eq_id: str = ""
    period_id: str = ""
    period_str: str = ""
    collection_exercise_sid: str = ""
    ru_ref: str = ""
    ru_name: str = ""
    ref_p_start_date: str = ""
    ref_p_end_date: str = ""
    form_type: str = ""
    return_by: str = ""
    trad_as: str = ""
    employment_date: str = ""
    region_code: str = ""
    language_code: str = ""
    variant_flags: VariantFlags = Field(default_factory=VariantFlags)
    roles: str = ""
    tx_id: str = ""

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready claim dict in declaration order."""
        return self.model_dump(mode="json")
