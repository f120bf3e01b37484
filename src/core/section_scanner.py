"""Sequential section scan shared by the experience, skills and education extractors."""

import enum
from typing import Iterable, Iterator

from .data.models import SectionKeywords


class ScanState(enum.Enum):
    SEEKING_HEADER = "seeking_header"
    IN_SECTION = "in_section"
    DONE = "done"


def scan_section(lines: Iterable[str], section: SectionKeywords) -> Iterator[str]:
    """Yield the lines belonging to a section, in order.

    A line containing a header keyword opens the section and is never
    yielded itself. Once inside, the first line containing a terminator
    keyword ends the scan for good. Header keywords are checked before
    terminators, so a line carrying both keeps the section open.
    """
    state = ScanState.SEEKING_HEADER
    for line in lines:
        lowered = line.lower()
        if section.is_header(lowered):
            state = ScanState.IN_SECTION
            continue
        if state is ScanState.IN_SECTION:
            if section.is_terminator(lowered):
                state = ScanState.DONE
            else:
                yield line
        if state is ScanState.DONE:
            break
