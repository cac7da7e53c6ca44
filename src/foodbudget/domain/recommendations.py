"""Segmentation of free-text budget recommendations for display."""

import re

RECOMMENDATION_STARTERS = (
    "Consider",
    "Limit",
    "Try",
    "Plan",
    "Use",
    "Avoid",
    "Look",
    "Prepare",
    "Replace",
    "Reduce",
    "Increase",
    "Buy",
    "Monitor",
    "Compare",
)

NUMBERED_PATTERN = re.compile(r"\d+\.\s+([^\n]+)")
STARTER_WORD = r"(?:%s)\b" % "|".join(RECOMMENDATION_STARTERS)
STARTER_PATTERN = re.compile(r"(?:^|\n)(?=%s)" % STARTER_WORD)
STARTS_WITH_STARTER = re.compile(STARTER_WORD)

# Paragraphs that restate the data rather than recommend anything
SUMMARY_MARKERS = ("your monthly spending", "analysis of your budget")


def recommendation_summary(text: str) -> str:
    """Return the opening paragraph of a recommendation text."""
    return (text or "").strip().split("\n\n")[0].strip()


def parse_recommendations(text: str) -> list[str]:
    """Split recommendation text into individual recommendations.

    Tries, in order: a numbered list with more than one entry, lines that
    open with a recommendation verb, and finally blank-line paragraphs.
    """
    if not text:
        return []

    numbered = [match.strip() for match in NUMBERED_PATTERN.findall(text)]
    if len(numbered) > 1:
        return numbered

    recommendations = []
    for part in STARTER_PATTERN.split(text):
        part = part.strip()
        # the introduction before the first verb is dropped
        if part and STARTS_WITH_STARTER.match(part):
            recommendations.append(" ".join(part.split("\n")).strip())
    if recommendations:
        return recommendations

    return [
        paragraph.strip()
        for paragraph in text.split("\n\n")
        if paragraph.strip()
        and not any(marker in paragraph.lower() for marker in SUMMARY_MARKERS)
    ]
