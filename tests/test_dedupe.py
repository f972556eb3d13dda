"""Tests for example deduplication."""

from gemreadme.readme.dedupe import dedupe_key, deduplicate_examples
from gemreadme.schemas import UsageExample


def _example(title, code):
    return UsageExample(title=title, code=code, language="ruby")


class TestDeduplicateExamples:
    """Tests for deduplicate_examples."""

    def test_removes_whitespace_variants(self):
        examples = [
            _example("Example 1", 'puts "hello"'),
            _example("Example 2", 'puts  "hello"  '),
            _example("Example 3", 'puts "world"'),
        ]
        result = deduplicate_examples(examples)

        assert [e.title for e in result] == ["Example 1", "Example 3"]
        assert result[0].code == 'puts "hello"'

    def test_newlines_count_as_whitespace(self):
        examples = [
            _example("Example 1", 'puts\n"hello"\n'),
            _example("Example 2", 'puts "hello"'),
        ]
        result = deduplicate_examples(examples)

        assert len(result) == 1
        assert result[0].title == "Example 1"

    def test_caps_after_dedup(self):
        examples = [_example(f"Example {i}", f"puts {i}") for i in range(15)]
        examples.insert(1, _example("Duplicate", "puts  0"))
        result = deduplicate_examples(examples)

        assert len(result) == 10
        assert [e.code for e in result] == [f"puts {i}" for i in range(10)]

    def test_custom_limit(self):
        examples = [_example(f"Example {i}", f"puts {i}") for i in range(5)]
        assert len(deduplicate_examples(examples, limit=3)) == 3

    def test_dedupe_key(self):
        assert dedupe_key("  a \n\t b  ") == "a b"
