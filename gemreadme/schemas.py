"""
Pydantic schemas for the gemreadme parser.

This module defines the data models produced while turning a raw README into
structured usage examples. Every model is frozen: values are built once per
parse call and never mutated afterwards.

Architecture:
- HeaderEvent: A markdown header seen during segmentation
- Section: A usage-relevant slice of the document
- CodeBlock: A fenced code block found inside a section
- UsageExample: Final titled, described and normalized example
- InstallationInfo: Install snippets for a named gem
- ProcessedReadme: Combined digest of a README (examples + clean text + description)
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Tuple

from gemreadme.config import MAX_USAGE_EXAMPLES


# ============================================================================
# SEGMENTATION SCHEMAS
# ============================================================================

class HeaderEvent(BaseModel):
    """A markdown header line recognised during segmentation."""
    level: int = Field(ge=1, le=6, description="Number of leading '#' characters")
    text: str = Field(description="Header text without the leading '#' markers")
    line_index: int = Field(ge=0, description="Zero-based line number in the document")

    class Config:
        frozen = True


class Section(BaseModel):
    """
    Contiguous slice of the document judged usage-relevant.

    Opened by a usage header and extended over any deeper subsections.
    The first line is always the header that opened the section.
    """
    header_level: int = Field(ge=1, le=6, description="Level of the header that opened the section")
    lines: Tuple[str, ...] = Field(description="Section lines in document order, header included")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "header_level": 2,
                "lines": ["## Usage", "", "```ruby", "require 'my_gem'", "```"]
            }
        }

    @property
    def text(self) -> str:
        """Section lines joined back into a single string."""
        return "\n".join(self.lines)


class CodeBlock(BaseModel):
    """Fenced code block extracted from a section."""
    language_tag: str = Field("", description="Raw tag after the opening fence (may be empty)")
    body: str = Field(description="Fence interior, untrimmed")
    offset: int = Field(ge=0, description="Character offset of the opening fence within the section text")

    class Config:
        frozen = True


# ============================================================================
# OUTPUT SCHEMAS
# ============================================================================

class UsageExample(BaseModel):
    """
    Usage example extracted from a README.

    The title is derived from the raw fence tag and the code content; the
    language is the normalized tag.
    """
    title: str = Field(description="Heuristic title (e.g., 'Installation', 'Basic Usage')")
    description: Optional[str] = Field(
        None,
        description="Prose line found just before the code block"
    )
    code: str = Field(description="Trimmed code block body")
    language: str = Field(description="Normalized language (ruby, bash, yaml, ...)")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "title": "Basic Usage",
                "description": "Require the gem and say hello:",
                "code": "require 'my_gem'\nMyGem.hello",
                "language": "ruby"
            }
        }

    @field_validator("code")
    @classmethod
    def code_must_not_be_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("code must not be empty")
        return value


class InstallationInfo(BaseModel):
    """Install snippets for a gem."""
    gem: str = Field(description="gem install command")
    bundler: str = Field(description="bundle add command")
    gemfile: str = Field(description="Gemfile entry")

    class Config:
        frozen = True

    @classmethod
    def for_gem(cls, gem_name: str) -> "InstallationInfo":
        return cls(
            gem=f"gem install {gem_name}",
            bundler=f"bundle add {gem_name}",
            gemfile=f"gem '{gem_name}'",
        )


class ProcessedReadme(BaseModel):
    """
    Structured digest of a README.

    Combines the cleaned document, its lead description and the usage
    examples found in its usage sections.
    """
    package_name: Optional[str] = Field(None, description="Gem name, when known")
    description: str = Field(description="Lead paragraph or the fallback description")
    readme_content: str = Field(description="Display-cleaned markdown")
    usage_examples: List[UsageExample] = Field(
        default_factory=list,
        description="Deduplicated usage examples in document order"
    )
    installation: Optional[InstallationInfo] = Field(
        None,
        description="Install snippets (only when package_name is given)"
    )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "package_name": "my_gem",
                "description": "A gem that says hello to the world.",
                "readme_content": "# my_gem\n\nA gem that says hello to the world.",
                "usage_examples": [],
                "installation": {
                    "gem": "gem install my_gem",
                    "bundler": "bundle add my_gem",
                    "gemfile": "gem 'my_gem'"
                }
            }
        }

    @field_validator("usage_examples")
    @classmethod
    def cap_usage_examples(cls, value: List[UsageExample]) -> List[UsageExample]:
        if len(value) > MAX_USAGE_EXAMPLES:
            raise ValueError(f"at most {MAX_USAGE_EXAMPLES} usage examples are allowed")
        return value
