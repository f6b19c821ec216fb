import re


EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
# Tolerant digit groups: "+1 555-123-4567", "(555) 123.4567", "0612345678"
PHONE_RE = re.compile(r"(\+?\d{1,4}[-.\s]?)?\(?\d{1,4}\)?[-.\s]?\d{1,4}[-.\s]?\d{1,9}")
LINKEDIN_RE = re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/in/[A-Za-z0-9_%-]+/?", re.IGNORECASE)
# Coarse site guess; a domain right after "@" belongs to an email, not a site
SITE_RE = re.compile(
    r"(?<![@\w.-])(?:https?://)?(?:www\.)?(?:[A-Za-z0-9-]+\.)*[A-Za-z0-9-]+\.(?:com|net|org|io|co|me)\b(?![\w.%+-]*@)(?:/[^\s,;)>\]]*)?",
    re.IGNORECASE,
)


def extract_email(text: str) -> str:
    m = EMAIL_RE.search(text or "")
    return m.group(0) if m else ""


def _compact_phone(raw: str) -> str:
    """Drop whitespace and separators, keeping a leading '+' and the digits."""
    raw = raw.strip()
    digits = re.sub(r"\D", "", raw)
    return f"+{digits}" if raw.startswith("+") else digits


def extract_phone(text: str) -> str:
    m = PHONE_RE.search(text or "")
    return _compact_phone(m.group(0)) if m else ""


def extract_linkedin(text: str) -> str:
    m = LINKEDIN_RE.search(text or "")
    return m.group(0) if m else ""


def extract_portfolio(text: str) -> str:
    """
    First bare site link (.com/.net/.org/.io/.co/.me).

    Not de-duplicated against extract_linkedin: a LinkedIn URL appearing before
    any personal site is returned here too.
    """
    m = SITE_RE.search(text or "")
    return m.group(0) if m else ""
