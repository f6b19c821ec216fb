from typing import Iterable, List, Sequence

# Headers that close whatever section is currently open
MAJOR_SECTIONS = ("experience", "education", "skills", "projects", "certifications", "references")

# Window used when nothing after the header looks like another section
FALLBACK_WINDOW = 10


def _contains_any(line: str, keywords: Iterable[str]) -> bool:
    return any(k in line for k in keywords)


def extract_section(
    text: str,
    header_keywords: Sequence[str],
    major_sections: Sequence[str] = MAJOR_SECTIONS,
    fallback_window: int = FALLBACK_WINDOW,
) -> str:
    """
    Return the body of the first section whose header line contains one of
    `header_keywords` (case-insensitive substring match).

    The body runs from the line after the header up to, not including, the next
    line mentioning a major section that is not one of our own header keywords
    (so a repeated "Experience" does not close the experience section). Without
    such a line the body is capped at `fallback_window` lines. Blank lines are
    kept and count toward the window. Returns "" when no header is found.
    """
    lines: List[str] = (text or "").splitlines()
    keywords = [k.lower() for k in header_keywords]

    start = -1
    for i, line in enumerate(lines):
        if _contains_any(line.lower(), keywords):
            start = i
            break
    if start == -1:
        return ""

    end = -1
    for i in range(start + 1, len(lines)):
        low = lines[i].lower()
        if _contains_any(low, major_sections) and not _contains_any(low, keywords):
            end = i
            break
    if end == -1:
        end = min(start + fallback_window, len(lines))

    return "\n".join(lines[start + 1:end]).strip()
