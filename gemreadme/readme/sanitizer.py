"""
Display cleanup for README markdown.

Replaces badge and image markup with meaningful alt text, flattens relative
links to their labels, and squeezes runs of blank lines.
"""

import re

from gemreadme.config import MIN_IMAGE_ALT_LENGTH


class MarkdownSanitizer:
    """Single-pass markdown cleanup; steps run in a fixed order."""

    IMAGE_PATTERN = re.compile(r'!\[([^\]]*)\]\([^)]+\)')

    # Links whose target is not absolute http(s)
    RELATIVE_LINK_PATTERN = re.compile(r'\[([^\]]+)\]\((?!https?://)([^)]+)\)')

    EXCESS_NEWLINES_PATTERN = re.compile(r'\n{3,}')

    def _replace_image(self, match: re.Match) -> str:
        alt_text = match.group(1)
        return alt_text if len(alt_text) > MIN_IMAGE_ALT_LENGTH else ''

    def clean(self, content: str) -> str:
        """
        Clean markdown for display.

        Args:
            content: Raw markdown

        Returns:
            Cleaned markdown, trimmed at both ends
        """
        cleaned = self.IMAGE_PATTERN.sub(self._replace_image, content)
        cleaned = self.RELATIVE_LINK_PATTERN.sub(r'\1', cleaned)
        cleaned = self.EXCESS_NEWLINES_PATTERN.sub('\n\n', cleaned)
        return cleaned.strip()
