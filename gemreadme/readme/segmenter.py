"""
Usage section segmentation.

Walks a README once, top to bottom, and collects the sections that describe
installation or usage. A usage section opens at a usage header, absorbs any
deeper subsections, and closes at the next header of equal or shallower depth.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from gemreadme.readme.headers import HeaderClassifier
from gemreadme.schemas import Section

logger = logging.getLogger(__name__)


@dataclass
class _OpenSection:
    """Buffer for the section currently being collected (the INSIDE state)."""
    level: int
    lines: List[str] = field(default_factory=list)

    def close(self) -> Section:
        return Section(header_level=self.level, lines=tuple(self.lines))


class SectionSegmenter:
    """
    Split a document into usage sections.

    State is either OUTSIDE (no open section) or INSIDE(level), held as an
    Optional[_OpenSection] local to each call.
    """

    def __init__(self, classifier: Optional[HeaderClassifier] = None):
        self.classifier = classifier or HeaderClassifier()

    def segment(self, content: str) -> List[Section]:
        """
        Collect usage sections from markdown content.

        Args:
            content: Raw markdown

        Returns:
            Sections in document order; sections never overlap
        """
        sections: List[Section] = []
        current: Optional[_OpenSection] = None

        for index, line in enumerate(content.split('\n')):
            header = self.classifier.classify(line, index)
            if header is None:
                if current is not None:
                    current.lines.append(line)
                continue

            if self.classifier.is_usage_header(line):
                if current is not None:
                    sections.append(current.close())
                current = _OpenSection(level=header.level, lines=[line])
            elif current is not None:
                if header.level <= current.level:
                    sections.append(current.close())
                    current = None
                else:
                    # Nested subsection: the opening level stays in force
                    current.lines.append(line)

        if current is not None:
            sections.append(current.close())

        logger.debug(f"Found {len(sections)} usage sections")
        return sections
