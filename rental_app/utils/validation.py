"""
Utilitaires de validation et d'horodatage / Validation and timestamp utilities.
Partagés par les services avant tout appel au stockage.
"""

import re
from datetime import date, datetime, timezone

from rental_app.exceptions import ValidationError

_NUMERIC_PREFIX = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def now_iso() -> str:
    """Horodatage UTC ISO 8601 / UTC ISO 8601 timestamp (microsecond precision keeps ordering stable)."""
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


def today_utc() -> date:
    """Date du jour UTC / Current UTC calendar date."""
    return datetime.now(timezone.utc).date()


def require_fields(**fields) -> None:
    """Lever ValidationError au premier champ vide / Raise on the first missing field."""
    missing = [name for name, value in fields.items() if value is None or value == ""]
    if missing:
        raise ValidationError(f"Missing fields: {', '.join(missing)}", field=missing[0])


def parse_iso_date(value: str, field: str) -> str:
    """Verifier le format YYYY-MM-DD / Check the YYYY-MM-DD format and return it unchanged."""
    try:
        parsed = date.fromisoformat(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a YYYY-MM-DD date", field=field)
    if parsed.isoformat() != value:
        raise ValidationError(f"{field} must be a YYYY-MM-DD date", field=field)
    return value


def parse_amount(value, field: str) -> float:
    """Montant non negatif ; illisible -> 0 / Non-negative amount; unparsable -> 0.

    Les chaines sont lues sur leur prefixe numerique ("350 MAD" -> 350).
    Strings are read on their leading numeric prefix ("350 MAD" -> 350).
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value.strip())
        if match is None:
            return 0.0
        value = match.group(0)
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if amount != amount or amount in (float("inf"), float("-inf")):
        return 0.0
    if amount < 0:
        raise ValidationError(f"{field} must not be negative", field=field)
    return round(amount, 2)
