"""
Lead description extraction.

Finds the first substantial paragraph of a README, skipping the title, badges
and short lines.
"""

from typing import Optional

from gemreadme.config import LEAD_DESCRIPTION_MAX_LENGTH, LEAD_LINE_MIN_LENGTH


class DescriptionExtractor:
    """Collect the README's lead paragraph in one pass from the top."""

    def extract(self, content: str) -> Optional[str]:
        """
        Extract the lead paragraph.

        Args:
            content: Raw markdown

        Returns:
            The paragraph text joined with single spaces, or None if no line
            qualifies
        """
        description = ''

        for line in content.split('\n'):
            trimmed = line.strip()

            # Blank lines and headers end a started paragraph
            if not trimmed or trimmed.startswith('#'):
                if description:
                    break
                continue

            # Badges and images
            if trimmed.startswith('![') or trimmed.startswith('[!['):
                continue

            if len(trimmed) <= LEAD_LINE_MIN_LENGTH:
                continue

            if not description:
                description = trimmed
            elif len(description) + len(trimmed) < LEAD_DESCRIPTION_MAX_LENGTH:
                description += ' ' + trimmed
            else:
                break

        return description or None
