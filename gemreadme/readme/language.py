"""
Language tags for README code blocks.

Two lookups over fence tags:
- family_for_tag: raw tag -> LanguageFamily, used to pick a title heuristic
- normalize_language: raw tag -> canonical language stored on the example

Title dispatch uses the raw tag exactly as written in the fence, so "rb"
selects the Ruby heuristics while the stored language reads "ruby".
"""

from enum import Enum
from typing import Dict


DEFAULT_LANGUAGE = "text"


class LanguageFamily(str, Enum):
    """Language families with their own title heuristics."""
    SHELL = "shell"
    RUBY = "ruby"
    GEMFILE = "gemfile"
    YAML = "yaml"
    JSON = "json"
    TEMPLATE = "template"
    OTHER = "other"


# Raw fence tag -> family (case-sensitive, tags are matched as written)
TAG_FAMILIES: Dict[str, LanguageFamily] = {
    # Shell
    'bash': LanguageFamily.SHELL,
    'shell': LanguageFamily.SHELL,
    'sh': LanguageFamily.SHELL,

    # Ruby
    'ruby': LanguageFamily.RUBY,
    'rb': LanguageFamily.RUBY,

    # Bundler
    'gemfile': LanguageFamily.GEMFILE,

    # Config
    'yaml': LanguageFamily.YAML,
    'yml': LanguageFamily.YAML,
    'json': LanguageFamily.JSON,

    # Templates
    'erb': LanguageFamily.TEMPLATE,
    'html': LanguageFamily.TEMPLATE,
}

# Language tag mappings (variations -> canonical name); unmapped tags pass through
LANGUAGE_MAPPINGS: Dict[str, str] = {
    'rb': 'ruby',
    'sh': 'bash',
    'shell': 'bash',
    'yml': 'yaml',
    'md': 'markdown',
    'gemfile': 'ruby',
    'rakefile': 'ruby',
}


def family_for_tag(raw_tag: str) -> LanguageFamily:
    return TAG_FAMILIES.get(raw_tag, LanguageFamily.OTHER)


def normalize_language(raw_tag: str) -> str:
    """
    Normalize a fence tag to its canonical language name.

    Args:
        raw_tag: Tag from the opening fence (e.g., "RB", "yml", "")

    Returns:
        Canonical lower-case language; "text" for a missing tag
    """
    tag = raw_tag.lower() if raw_tag else DEFAULT_LANGUAGE
    return LANGUAGE_MAPPINGS.get(tag, tag)
