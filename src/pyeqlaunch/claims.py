"""Build launch token claims from submitted form values."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from pyeqlaunch._constants import FORM_FIELDS, SCHEMA_PATTERN, TOKEN_TTL_SECONDS
from pyeqlaunch._redact import redact_form
from pyeqlaunch.models.claims import EqClaims, VariantFlags

_logger = logging.getLogger(__name__)


def extract_eq_id_form_type(schema: str) -> tuple[str, str]:
    """Split a schema filename such as ``"1_0205.json"`` into ``("1", "0205")``.

    Returns ``("", "")`` when *schema* does not match; callers may launch
    with partial forms, so a bad schema name is not an error.
    """
    match = SCHEMA_PATTERN.match(schema or "")
    if match is None:
        return "", ""
    return match.group("eq_id"), match.group("form_type")


def form_value(form: Mapping[str, Any], name: str) -> str:
    """Return the first submitted value for *name*, or ``""`` if absent.

    Accepts plain ``{name: value}`` dicts as well as ``parse_qs`` style
    ``{name: [values]}`` dicts and multi-dicts whose ``get`` already
    returns the first value.
    """
    value = form.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        if not value:
            return ""
        value = value[0]
    return value if isinstance(value, str) else str(value)


def raw_form(form: Mapping[str, Any]) -> dict[str, Any]:
    """Return every submitted value of *form*, for logging.

    Multi-dicts (anything with ``getlist``) keep all values per field.
    """
    getlist = getattr(form, "getlist", None)
    if callable(getlist):
        return {key: getlist(key) for key in form}
    return dict(form)


def generate_claims(
    form: Mapping[str, Any],
    *,
    now: datetime | None = None,
    redact_logs: bool = False,
) -> EqClaims:
    """Build the claim set for one launch.

    Parameters
    ----------
    form : Mapping
        Submitted form values. Fields that are missing become ``""``.
    now : datetime or None
        Issue time; defaults to the current UTC time.
    redact_logs : bool
        Mask personal fields when logging the submitted form.

    Returns
    -------
    EqClaims
        Claims expiring ``TOKEN_TTL_SECONDS`` after issue, with fresh
        ``jti`` and ``tx_id`` values.
    """
    submitted = raw_form(form)
    _logger.debug("POST received: %s", redact_form(submitted) if redact_logs else submitted)

    issued = int((now or datetime.now(tz=UTC)).timestamp())
    eq_id, form_type = extract_eq_id_form_type(form_value(form, "schema"))

    fields = {name: form_value(form, name) for name in FORM_FIELDS}
    return EqClaims(
        iat=issued,
        exp=issued + TOKEN_TTL_SECONDS,
        jti=str(uuid.uuid4()),
        eq_id=eq_id,
        form_type=form_type,
        tx_id=str(uuid.uuid4()),
        variant_flags=VariantFlags(sexual_identity=form_value(form, "sexual_identity")),
        **fields,
    )
