"""Client-side input checks used before anything is sent to the backend.

These only look at the shape of the input; the backend re-validates
everything and owns hashing, balances and limits.
"""
import re
from dataclasses import dataclass, field
from typing import Dict

PIN_LENGTH = 4
PASSWORD_MIN_LENGTH = 6  # signup / reset
STRONG_PASSWORD_MIN_LENGTH = 8  # change password
AIRTIME_MIN_AMOUNT = 50  # naira

SPECIAL_CHARS = '!@#$%^&*(),.?":{}|<>'

_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
_PHONE_RE = re.compile(r"^0\d{10}$")


@dataclass(slots=True)
class ValidationResult:
    """Outcome of a check.

    checks: Dict[str, bool] — individual rules, e.g. for a checklist in the UI
    error:  str | None      — first failing rule, phrased for the user
    """

    checks: Dict[str, bool] = field(default_factory=dict)
    error: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.is_valid


def validate_pin(pin: str, confirm_pin: str | None = None) -> ValidationResult:
    checks = {
        "length": len(pin) == PIN_LENGTH,
        "digits": bool(re.fullmatch(rf"\d{{{PIN_LENGTH}}}", pin)),
    }
    if confirm_pin is not None:
        checks["matches"] = pin == confirm_pin and len(confirm_pin) == PIN_LENGTH

    error = None
    if not checks["length"]:
        error = f"PIN must be exactly {PIN_LENGTH} digits"
    elif not checks["digits"]:
        error = "PIN must contain only numbers"
    elif confirm_pin is not None and not checks["matches"]:
        error = "PINs do not match"
    return ValidationResult(checks, error)


def validate_password(password: str, confirm_password: str | None = None) -> ValidationResult:
    """Signup and reset-password rule: a minimum length only."""
    checks = {"min_length": len(password) >= PASSWORD_MIN_LENGTH}
    if confirm_password is not None:
        checks["matches"] = password == confirm_password and len(confirm_password) > 0

    error = None
    if not checks["min_length"]:
        error = f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
    elif confirm_password is not None and not checks["matches"]:
        error = "Passwords do not match"
    return ValidationResult(checks, error)


def validate_strong_password(password: str, current_password: str | None = None) -> ValidationResult:
    checks = {
        "min_length": len(password) >= STRONG_PASSWORD_MIN_LENGTH,
        "has_upper": bool(re.search(r"[A-Z]", password)),
        "has_lower": bool(re.search(r"[a-z]", password)),
        "has_number": bool(re.search(r"\d", password)),
        "has_special": any(ch in SPECIAL_CHARS for ch in password),
    }
    error = None
    if not all(checks.values()):
        error = (
            f"Password must be at least {STRONG_PASSWORD_MIN_LENGTH} characters and include "
            "upper and lower case letters, a number and a special character"
        )
    elif current_password is not None and password == current_password:
        error = "New password must be different from current password"
    return ValidationResult(checks, error)


def validate_email(email: str) -> ValidationResult:
    ok = bool(_EMAIL_RE.search(email.strip()))
    return ValidationResult({"format": ok}, None if ok else "Please enter a valid email address")


def validate_phone_number(phone: str) -> ValidationResult:
    digits = re.sub(r"[\s-]", "", phone)
    ok = bool(_PHONE_RE.match(digits))
    return ValidationResult(
        {"format": ok}, None if ok else "Please enter a valid 11-digit phone number"
    )


def validate_amount(amount: str | float, minimum: float = AIRTIME_MIN_AMOUNT) -> ValidationResult:
    try:
        value = float(str(amount).replace(",", ""))
    except ValueError:
        value = None
    ok = value is not None and value >= minimum
    return ValidationResult(
        {"minimum": ok},
        None if ok else f"Please enter a valid amount (minimum ₦{minimum:g})",
    )
