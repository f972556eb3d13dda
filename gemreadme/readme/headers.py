"""
Header classification for README segmentation.

Decides whether a line is a markdown ATX header, its nesting level, and whether
it names a usage-relevant section (Usage, Examples, Installation, ...).
"""

import re
from typing import Optional

from gemreadme.schemas import HeaderEvent


class HeaderClassifier:
    """
    Pure predicates over single lines.

    All patterns are compiled once and matched fresh against each line, so a
    classifier can be shared freely between parses.
    """

    # "# Title" .. "###### Title" - at least one whitespace after the markers
    HEADER_PATTERN = re.compile(r'^(#{1,6})\s')

    LEADING_HASHES_PATTERN = re.compile(r'^#+')

    # Header vocabulary that opens a usage section
    USAGE_SECTION_PATTERNS = (
        re.compile(
            r'^#{1,6}\s*(usage|use|using|how to use|getting started|quick start'
            r'|examples?|basic usage|installation)\s*$',
            re.IGNORECASE
        ),
        re.compile(r'^usage:?\s*$', re.IGNORECASE),
        re.compile(r'^examples?:?\s*$', re.IGNORECASE),
        re.compile(r'^installation:?\s*$', re.IGNORECASE),
    )

    def is_header(self, line: str) -> bool:
        return self.HEADER_PATTERN.match(line) is not None

    def header_level(self, line: str) -> int:
        """Count of leading '#' characters (0 for non-header lines)."""
        match = self.LEADING_HASHES_PATTERN.match(line)
        return len(match.group(0)) if match else 0

    def is_usage_header(self, line: str) -> bool:
        return any(pattern.match(line) for pattern in self.USAGE_SECTION_PATTERNS)

    def classify(self, line: str, line_index: int) -> Optional[HeaderEvent]:
        """
        Build a HeaderEvent for a header line.

        Args:
            line: Raw document line
            line_index: Zero-based position of the line

        Returns:
            HeaderEvent, or None if the line is not a header
        """
        if not self.is_header(line):
            return None

        level = self.header_level(line)
        return HeaderEvent(
            level=level,
            text=line[level:].strip(),
            line_index=line_index
        )
