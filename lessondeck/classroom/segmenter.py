"""
Segmenter - Split a lesson body into slides at top-level headings.

A slide starts at every line whose first characters (column 0) are the
heading marker. Text before the first heading is its own slide unless it
is blank. Slides are contiguous substrings of the body, so joining them
gives back the body minus any dropped blank chunk.
"""

from ..config import DEFAULT_HEADING_MARKER


PLACEHOLDER_SLIDE = "lesson content unavailable"


def is_heading_line(line: str, marker: str = DEFAULT_HEADING_MARKER) -> bool:
    """True if the line opens a new slide."""
    return line.startswith(marker)


def split_lines(body: str) -> list[str]:
    """Split at "\\n" only, keeping line endings ("\\r\\n" stays intact)."""
    lines = [line + "\n" for line in body.split("\n")]
    lines[-1] = lines[-1][:-1]
    return lines if lines[-1] else lines[:-1]


def segment_lesson(body: str, marker: str = DEFAULT_HEADING_MARKER) -> list[str]:
    """
    Split a lesson body into an ordered, non-empty list of slides.

    Args:
        body: Raw lesson text (markdown)
        marker: Heading marker that must start a line to begin a slide

    Returns:
        List of slide strings. An empty body yields [PLACEHOLDER_SLIDE],
        a body with no non-blank chunk yields [body].
    """
    if not body:
        return [PLACEHOLDER_SLIDE]

    chunks: list[str] = []
    current: list[str] = []
    for line in split_lines(body):
        if is_heading_line(line, marker) and current:
            chunks.append("".join(current))
            current = []
        current.append(line)
    if current:
        chunks.append("".join(current))

    slides = [chunk for chunk in chunks if chunk.strip()]
    return slides or [body]
