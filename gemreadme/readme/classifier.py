"""
Title and description heuristics for README code blocks.

Titles come from the raw fence tag plus the block content (e.g. a bash block
starting with `gem install` is "Installation"). Descriptions come from the
closest prose line above the block, if it reads like prose.
"""

import re
from typing import Callable, Dict, Optional

from gemreadme.config import EXAMPLE_DESCRIPTION_MAX_LENGTH, EXAMPLE_DESCRIPTION_MIN_LENGTH
from gemreadme.readme.language import LanguageFamily, family_for_tag, normalize_language
from gemreadme.schemas import CodeBlock, UsageExample


def _shell_title(first_line: str, code: str) -> str:
    if 'gem install' in first_line or 'bundle add' in first_line:
        return 'Installation'
    if 'bundle install' in first_line or 'bundle exec' in first_line:
        return 'Bundle Usage'
    return 'Command Line Usage'


def _ruby_title(first_line: str, code: str) -> str:
    if first_line.startswith('require ') or first_line.startswith('require_relative'):
        return 'Basic Usage'
    if 'class ' in code or 'module ' in code:
        return 'Class/Module Definition'
    if 'def ' in code:
        return 'Method Example'
    return 'Ruby Example'


def _yaml_title(first_line: str, code: str) -> str:
    if 'gem:' in code or 'rails:' in code:
        return 'Configuration'
    return 'YAML Configuration'


# One handler per family; OTHER is the default arm
TITLE_HANDLERS: Dict[LanguageFamily, Callable[[str, str], str]] = {
    LanguageFamily.SHELL: _shell_title,
    LanguageFamily.RUBY: _ruby_title,
    LanguageFamily.GEMFILE: lambda first_line, code: 'Gemfile Configuration',
    LanguageFamily.YAML: _yaml_title,
    LanguageFamily.JSON: lambda first_line, code: 'JSON Configuration',
    LanguageFamily.TEMPLATE: lambda first_line, code: 'Template Example',
    LanguageFamily.OTHER: lambda first_line, code: 'Code Example',
}


class ExampleClassifier:
    """
    Turn extracted code blocks into UsageExample objects.

    Title dispatch uses the raw fence tag; the stored language uses the
    normalized tag. These can differ ("rb" vs "ruby").
    """

    # Simple heuristics to detect text that looks like code
    CODE_INDICATORS = (
        re.compile(r'^\s*[{}\[\]();,]'),  # Starts with common code characters
        re.compile(r'[{}\[\]();,]\s*$'),  # Ends with common code characters
        re.compile(r'^\s*(class|def|module|require|include|extend|if|unless|case|when)\s+'),  # Ruby keywords
        re.compile(r'^\s*\$'),  # Shell prompt
        re.compile(r'^\s*#'),  # Ruby comments
        re.compile(r'^\s*//'),  # Other language comments
        re.compile(r'^\s*gem\s+[\'"]'),  # Gemfile entries
    )

    BULLET_PATTERN = re.compile(r'^[*-]\s*')

    def generate_title(self, code: str, language_tag: str) -> str:
        """
        Pick a title for a code block.

        Args:
            code: Trimmed block body
            language_tag: Raw fence tag, exactly as written

        Returns:
            Title such as 'Installation', 'Basic Usage' or 'Code Example'
        """
        first_line = code.split('\n')[0].strip()
        handler = TITLE_HANDLERS[family_for_tag(language_tag)]
        return handler(first_line, code)

    def looks_like_code(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self.CODE_INDICATORS)

    def extract_description(self, section_text: str, block_offset: int) -> Optional[str]:
        """
        Find a description for the block starting at block_offset.

        Scans upwards, skipping blank lines and '#' lines. Only the first
        remaining line is considered: it becomes the description if it has a
        reasonable length and reads like prose, otherwise there is none.
        """
        before_block = section_text[:block_offset]

        for line in reversed(before_block.split('\n')):
            trimmed = line.strip()
            if not trimmed or trimmed.startswith('#'):
                continue

            if (EXAMPLE_DESCRIPTION_MIN_LENGTH < len(trimmed) < EXAMPLE_DESCRIPTION_MAX_LENGTH
                    and not self.looks_like_code(trimmed)):
                return self.BULLET_PATTERN.sub('', trimmed, count=1)

            break

        return None

    def classify(self, block: CodeBlock, section_text: str) -> UsageExample:
        code = block.body.strip()
        raw_tag = block.language_tag or 'text'

        return UsageExample(
            title=self.generate_title(code, raw_tag),
            description=self.extract_description(section_text, block.offset),
            code=code,
            language=normalize_language(raw_tag),
        )
