"""README parsing components."""

from .headers import HeaderClassifier
from .segmenter import SectionSegmenter
from .code_extractor import CodeBlockExtractor
from .classifier import ExampleClassifier
from .dedupe import deduplicate_examples
from .sanitizer import MarkdownSanitizer
from .description import DescriptionExtractor
from .parser import ReadmeParser, parse_usage_examples, clean_markdown, extract_description
from .processor import ReadmeProcessor

__all__ = [
    "HeaderClassifier",
    "SectionSegmenter",
    "CodeBlockExtractor",
    "ExampleClassifier",
    "deduplicate_examples",
    "MarkdownSanitizer",
    "DescriptionExtractor",
    "ReadmeParser",
    "parse_usage_examples",
    "clean_markdown",
    "extract_description",
    "ReadmeProcessor",
]
