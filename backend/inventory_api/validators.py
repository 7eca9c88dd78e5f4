import re

MIN_VEHICLE_YEAR = 1886

_HTML_TAG_RE = re.compile(r"<[^>]*>")
_SQL_INJECTION_RES = (
    re.compile(r"('|\\'|;|\\;|\\x27|\\x2D\\x2D|--|\||\*|%|@)", re.IGNORECASE),
    re.compile(r"(DROP|DELETE|INSERT|UPDATE|SELECT|UNION|ALTER|CREATE|EXEC|EXECUTE)", re.IGNORECASE),
    re.compile(r"(script|javascript|vbscript|onload|onerror|onclick)", re.IGNORECASE),
)
_ALLOWED_TEXT_RE = re.compile(r"[a-zA-ZÀ-ÿ0-9\s\-&.()]+")


def clean_text(value: str, *, label: str, min_length: int = 1) -> str:
    """Trim ``value`` and reject anything outside the safe text allow-list.

    The keyword checks are deliberately blunt: a color such as "Created Blue"
    is rejected along with real injection attempts.
    """
    text = value.strip()
    if not text:
        raise ValueError(f"{label} cannot be blank")
    if _HTML_TAG_RE.search(text):
        raise ValueError(f"{label} cannot contain HTML tags")
    for pattern in _SQL_INJECTION_RES:
        if pattern.search(text):
            raise ValueError(f"{label} contains forbidden characters")
    if not _ALLOWED_TEXT_RE.fullmatch(text):
        raise ValueError(f"{label} contains forbidden characters")
    if len(text) < min_length:
        raise ValueError(f"{label} must have at least {min_length} characters")
    return text

