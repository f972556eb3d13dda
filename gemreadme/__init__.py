"""
gemreadme - Structured data from Ruby gem READMEs.

Main Components:
- Segmentation: Find Usage / Installation / Examples sections by header
- Extraction: Pull fenced code blocks out of those sections
- Classification: Title and describe each block, normalize its language
- Cleanup: Display-friendly markdown and the README's lead description

Usage:
    from gemreadme import ReadmeParser

    parser = ReadmeParser()
    examples = parser.parse_usage_examples(readme_text)
    description = parser.extract_description(readme_text)
"""

from .schemas import (
    HeaderEvent,
    Section,
    CodeBlock,
    UsageExample,
    InstallationInfo,
    ProcessedReadme,
)
from .diagnostics import (
    ParseFailure,
    DiagnosticSink,
    LoggingDiagnosticSink,
    CollectingDiagnosticSink,
)
from .readme import (
    ReadmeParser,
    ReadmeProcessor,
    parse_usage_examples,
    clean_markdown,
    extract_description,
)

__all__ = [
    # Parser
    "ReadmeParser",
    "ReadmeProcessor",
    "parse_usage_examples",
    "clean_markdown",
    "extract_description",

    # Schemas
    "HeaderEvent",
    "Section",
    "CodeBlock",
    "UsageExample",
    "InstallationInfo",
    "ProcessedReadme",

    # Diagnostics
    "ParseFailure",
    "DiagnosticSink",
    "LoggingDiagnosticSink",
    "CollectingDiagnosticSink",
]

__version__ = "0.1.0"
