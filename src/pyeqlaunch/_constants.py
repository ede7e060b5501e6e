"""Internal constants shared across the library."""

import re

# Key identifier placed in the JWS header; the survey runner looks up the
# matching verification key by this value.
SIGNING_KEY_ID = "EDCRRM"
SIGNING_ALGORITHM = "RS256"

KEY_ENCRYPTION_ALGORITHM = "RSA-OAEP"
CONTENT_ENCRYPTION_ALGORITHM = "A256GCM"

TOKEN_TYPE = "JWT"

# Launch tokens are short lived; not configurable by callers.
TOKEN_TTL_SECONDS = 10 * 60

# "<eq_id>_<form_type>.json", e.g. "1_0205.json". \w is ASCII-only.
SCHEMA_PATTERN = re.compile(r"^(?P<eq_id>[a-z0-9]+)_(?P<form_type>\w+)\.json", re.ASCII)

# Form fields copied verbatim into the claims.
FORM_FIELDS: tuple[str, ...] = (
    "user_id",
    "period_id",
    "period_str",
    "collection_exercise_sid",
    "ru_ref",
    "ru_name",
    "ref_p_start_date",
    "ref_p_end_date",
    "return_by",
    "trad_as",
    "employment_date",
    "region_code",
    "language_code",
    "roles",
)
