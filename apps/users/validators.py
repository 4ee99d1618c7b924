"""
Field checks for the profile and password-change forms.

Plain predicates with no app registry dependency; form and serializer code
imports them directly, so apps.users needs no entry in INSTALLED_APPS. Each
returns a bool so the caller decides which message to show next to the field.
"""
import re

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PASSWORD_PATTERN = re.compile(r"(?=.*[A-Za-z])(?=.*[0-9])[A-Za-z0-9@$!%*#?&]{8,}")
FULLNAME_PATTERN = re.compile(
    r"[A-ZŻŹĆĄŚĘŁÓŃ][A-Za-zżźćńółęąśŻŹĆĄŚĘŁÓŃ]+\s[A-ZŻŹĆĄŚĘŁÓŃ][A-Za-zżźćńółęąśŻŹĆĄŚĘŁÓŃ]+"
)
POST_MAX_LENGTH = 255


def validate_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_password(password: str) -> bool:
    """At least 8 characters with one letter and one digit."""
    return PASSWORD_PATTERN.fullmatch(password) is not None


def validate_passwords(password1: str, password2: str) -> bool:
    return password1 == password2


def validate_fullname(fullname: str) -> bool:
    """Two capitalised words, e.g. "Jan Kowalski"; Polish letters allowed."""
    # search, not fullmatch: trailing text after the surname is accepted
    return FULLNAME_PATTERN.search(fullname) is not None


def validate_post_content(content: str) -> bool:
    return 0 < len(content) <= POST_MAX_LENGTH
