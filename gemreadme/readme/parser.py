"""
README parser - public entry points.

Ties the segmentation, extraction, classification and cleanup components
together behind three operations that never raise:

- parse_usage_examples: structured usage examples (empty list on failure)
- clean_markdown: display-cleaned text (original input on failure)
- extract_description: lead paragraph ("No description available" on failure)

Failures are wrapped in ParseFailure and passed to an injected diagnostic sink.
"""

import logging
from typing import Callable, List, Optional, TypeVar

from gemreadme.config import FALLBACK_DESCRIPTION, MAX_USAGE_EXAMPLES
from gemreadme.diagnostics import DiagnosticSink, LoggingDiagnosticSink, ParseFailure
from gemreadme.readme.classifier import ExampleClassifier
from gemreadme.readme.code_extractor import CodeBlockExtractor
from gemreadme.readme.dedupe import deduplicate_examples
from gemreadme.readme.description import DescriptionExtractor
from gemreadme.readme.sanitizer import MarkdownSanitizer
from gemreadme.readme.segmenter import SectionSegmenter
from gemreadme.schemas import UsageExample

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ReadmeParser:
    """
    Extract structured information from README markdown.

    Holds only read-only components, so one instance can serve any number of
    documents, including concurrently.
    """

    def __init__(self, sink: Optional[DiagnosticSink] = None):
        """
        Initialize the parser.

        Args:
            sink: Where swallowed failures are reported (default: logging)
        """
        self.sink = sink or LoggingDiagnosticSink()
        self.segmenter = SectionSegmenter()
        self.extractor = CodeBlockExtractor()
        self.classifier = ExampleClassifier()
        self.sanitizer = MarkdownSanitizer()
        self.description_extractor = DescriptionExtractor()

    def _fail_open(self, operation: str, default: T, func: Callable[[], T]) -> T:
        try:
            return func()
        except Exception as e:
            self.sink.report(ParseFailure(operation, e))
            return default

    def parse_usage_examples(self, readme_content: str, include_examples: bool = True) -> List[UsageExample]:
        """
        Extract usage examples from the README's usage sections.

        Args:
            readme_content: Raw README markdown
            include_examples: When False, skip extraction entirely

        Returns:
            At most 10 unique examples in document order
        """
        if not include_examples or not readme_content:
            return []

        return self._fail_open(
            "parse usage examples from README",
            [],
            lambda: self._parse_usage_examples(readme_content)
        )

    def _parse_usage_examples(self, readme_content: str) -> List[UsageExample]:
        examples = []

        for section in self.segmenter.segment(readme_content):
            section_text = section.text
            for block in self.extractor.extract_from_section(section):
                examples.append(self.classifier.classify(block, section_text))

        unique_examples = deduplicate_examples(examples, limit=MAX_USAGE_EXAMPLES)

        logger.debug(f"Extracted {len(unique_examples)} usage examples from README")
        return unique_examples

    def clean_markdown(self, content: str) -> str:
        """Clean README markdown for display; returns the input unchanged on failure."""
        return self._fail_open(
            "clean markdown content",
            content,
            lambda: self.sanitizer.clean(content)
        )

    def extract_description(self, content: str) -> str:
        """Extract the README's lead paragraph, or the fallback description."""
        return self._fail_open(
            "extract description from README",
            FALLBACK_DESCRIPTION,
            lambda: self.description_extractor.extract(content) or FALLBACK_DESCRIPTION
        )


default_parser = ReadmeParser()


def parse_usage_examples(readme_content: str, include_examples: bool = True) -> List[UsageExample]:
    """
    Convenience function using the shared default parser.

    Example:
        >>> examples = parse_usage_examples("## Usage\\n```ruby\\nrequire 'x'\\n```")
        >>> examples[0].title
        'Basic Usage'
    """
    return default_parser.parse_usage_examples(readme_content, include_examples)


def clean_markdown(content: str) -> str:
    return default_parser.clean_markdown(content)


def extract_description(content: str) -> str:
    return default_parser.extract_description(content)
