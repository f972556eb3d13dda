"""
README digest assembly.

Combines the parser operations into a single ProcessedReadme: cleaned text,
lead description, usage examples, and install snippets when the gem name is
known.
"""

import logging
from typing import Optional

from gemreadme.readme.parser import ReadmeParser
from gemreadme.schemas import InstallationInfo, ProcessedReadme

logger = logging.getLogger(__name__)


class ReadmeProcessor:
    """Build ProcessedReadme objects from raw README text."""

    def __init__(self, parser: Optional[ReadmeParser] = None):
        self.parser = parser or ReadmeParser()

    def process(
        self,
        readme_content: str,
        include_examples: bool = True,
        package_name: Optional[str] = None,
        fallback_summary: Optional[str] = None
    ) -> ProcessedReadme:
        """
        Process a README into a structured digest.

        Args:
            readme_content: Raw README markdown (may be empty)
            include_examples: Whether to extract usage examples
            package_name: Gem name, used for install snippets and the
                         synthesized README
            fallback_summary: Summary used to synthesize a README when
                            readme_content is blank

        Returns:
            ProcessedReadme digest
        """
        if not readme_content.strip() and fallback_summary:
            title = package_name or "README"
            readme_content = f"# {title}\n\n{fallback_summary}"
            logger.debug(f"Using summary as README for {title}")

        # Examples are parsed from the raw text, not the cleaned copy
        usage_examples = self.parser.parse_usage_examples(readme_content, include_examples)

        installation = InstallationInfo.for_gem(package_name) if package_name else None

        processed = ProcessedReadme(
            package_name=package_name,
            description=self.parser.extract_description(readme_content),
            readme_content=self.parser.clean_markdown(readme_content),
            usage_examples=usage_examples,
            installation=installation,
        )

        logger.info(f"Processed README for {package_name or 'unnamed package'}: {len(usage_examples)} usage examples")
        return processed
