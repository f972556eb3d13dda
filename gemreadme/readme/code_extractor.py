"""
Fenced code block extraction from usage sections.

Finds ```lang ... ``` blocks in a section's text, left to right, and records
where each block starts so the classifier can look back for a description.
"""

import re
import logging
from typing import List

from gemreadme.schemas import CodeBlock, Section

logger = logging.getLogger(__name__)


class CodeBlockExtractor:
    """
    Extract fenced code blocks from section text.

    Handles:
    - Tagged fences: ```ruby ... ```
    - Untagged fences: ``` ... ```

    The opening fence must start a line; the first following ``` closes the
    block. Nested fences are not supported.
    """

    # Opening fence, optional letters/digits tag, newline, then body up to the next fence
    CODE_BLOCK_PATTERN = re.compile(
        r'^```([A-Za-z0-9]+)?\n(.*?)```',
        re.MULTILINE | re.DOTALL
    )

    def extract(self, section_text: str) -> List[CodeBlock]:
        """
        Extract non-empty code blocks from section text.

        Args:
            section_text: Section lines joined with newlines

        Returns:
            CodeBlock objects in document order
        """
        blocks = []

        for match in self.CODE_BLOCK_PATTERN.finditer(section_text):
            body = match.group(2)
            if not body.strip():
                continue

            blocks.append(CodeBlock(
                language_tag=match.group(1) or '',
                body=body,
                offset=match.start()
            ))

        return blocks

    def extract_from_section(self, section: Section) -> List[CodeBlock]:
        blocks = self.extract(section.text)
        logger.debug(f"Extracted {len(blocks)} code blocks from level-{section.header_level} section")
        return blocks
