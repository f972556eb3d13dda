"""Tests for usage section segmentation."""

from gemreadme.readme.segmenter import SectionSegmenter


class TestSectionSegmenter:
    """Tests for the single-pass section walk."""

    def setup_method(self):
        self.segmenter = SectionSegmenter()

    def test_no_usage_headers(self):
        """Documents without usage headers yield no sections."""
        content = "# Title\n\nSome text.\n\n## Contributing\n\nPRs welcome."
        assert self.segmenter.segment(content) == []

    def test_section_starts_with_header_line(self):
        content = "# Title\n\nIntro\n\n## Usage\n\nCall it.\n"
        sections = self.segmenter.segment(content)

        assert len(sections) == 1
        assert sections[0].header_level == 2
        assert sections[0].lines[0] == "## Usage"
        assert "Intro" not in sections[0].text
        assert "Call it." in sections[0].text

    def test_nested_subsections_stay_inside(self):
        """Deeper headers are part of the usage section."""
        content = (
            "## Usage\n"
            "Basic usage example:\n"
            "### Advanced Usage\n"
            "More complex example:\n"
            "#### Even deeper\n"
            "deep text\n"
            "## Other Section\n"
            "This should not be included."
        )
        sections = self.segmenter.segment(content)

        assert len(sections) == 1
        text = sections[0].text
        assert "Basic usage example" in text
        assert "### Advanced Usage" in text
        assert "deep text" in text
        assert "This should not be included" not in text
        assert sections[0].header_level == 2

    def test_section_ends_at_shallower_header(self):
        """A shallower non-usage header closes the section."""
        content = "### Usage\ninside\n# Top\noutside"
        sections = self.segmenter.segment(content)

        assert len(sections) == 1
        assert sections[0].lines == ("### Usage", "inside")

    def test_nested_level_does_not_replace_opening_level(self):
        """After a nested header, a header at the nested level is still nested."""
        content = "## Usage\na\n### One\nb\n### Two\nc\n## Next\nd"
        sections = self.segmenter.segment(content)

        assert len(sections) == 1
        assert sections[0].lines == ("## Usage", "a", "### One", "b", "### Two", "c")

    def test_consecutive_usage_headers_split_sections(self):
        """Each usage header starts its own section."""
        content = "# Installation\ninstall text\n## Usage\nusage text\n### Examples\nexample text"
        sections = self.segmenter.segment(content)

        assert [s.header_level for s in sections] == [1, 2, 3]
        assert sections[0].lines == ("# Installation", "install text")
        assert sections[1].lines == ("## Usage", "usage text")
        assert sections[2].lines == ("### Examples", "example text")

    def test_multiple_disjoint_sections(self, sample_readme):
        sections = self.segmenter.segment(sample_readme)

        assert len(sections) == 2
        assert sections[0].lines[0] == "## Installation"
        assert sections[1].lines[0] == "## Usage"
        assert all("Contributing" not in s.text for s in sections)

    def test_final_section_flushed_at_end(self):
        content = "## Usage\nlast line"
        sections = self.segmenter.segment(content)

        assert len(sections) == 1
        assert sections[0].text == "## Usage\nlast line"

    def test_bare_usage_line_does_not_open_section(self):
        """Bare 'Usage:' lines are not headers, so they never open a section."""
        content = "Usage:\n```ruby\nfoo\n```"
        assert self.segmenter.segment(content) == []
