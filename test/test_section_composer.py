"""
Tests for section composition and partial merges
"""
from domain.project.sections import (
    SectionKey,
    compose_sections,
    merge_section_updates,
    split_sections,
    empty_section_map,
)


class TestComposeSections:
    """Test joining a section map back into one document."""

    def test_single_section(self):
        sections = {
            SectionKey.SUMMARY: "X",
            SectionKey.HARDWARE: "",
            SectionKey.NETWORK: "",
            SectionKey.SOFTWARE: "",
            SectionKey.PROJECT_DOCUMENTATION: "",
            SectionKey.INSTALLATION_DEPLOYMENT: "",
        }

        assert compose_sections(sections) == "# Summary\n\nX"

    def test_all_empty_yields_empty_string(self):
        assert compose_sections(empty_section_map()) == ""
        assert compose_sections({}) == ""

    def test_canonical_order_regardless_of_input_order(self):
        sections = {
            SectionKey.INSTALLATION_DEPLOYMENT: "deploy",
            SectionKey.NETWORK: "net",
            SectionKey.PROJECT_DOCUMENTATION: "docs",
        }

        assert compose_sections(sections) == (
            "# Project Documentation\n\ndocs\n\n"
            "# Network\n\nnet\n\n"
            "# Installation & Deployment\n\ndeploy"
        )

    def test_whitespace_only_sections_are_omitted(self):
        sections = {SectionKey.SUMMARY: "  \n\t ", SectionKey.SOFTWARE: "  python  "}

        assert compose_sections(sections) == "# Software\n\npython"

    def test_plain_string_keys_and_none_values(self):
        sections = {"hardware": "GPU", "summary": None, "unknownKey": "ignored"}

        assert compose_sections(sections) == "# Hardware\n\nGPU"

    def test_original_heading_wording_is_normalized(self, sample_content):
        composed = compose_sections(split_sections(sample_content))

        assert composed == (
            "# Summary\n\nInventory tracker for the warehouse team.\n\n"
            "# Hardware\n\n- 2x Raspberry Pi 4\n\n"
            "# Installation & Deployment\n\nStep 1\nStep 2"
        )
        assert "Draft notes" not in composed
        assert "Executive" not in composed


class TestMergeSectionUpdates:
    """Test replacing only the updated sections of a stored document."""

    def test_untouched_sections_are_kept(self):
        content = "# Summary\nOld overview\n# Hardware\n- CPU"

        merged = merge_section_updates(content, {SectionKey.HARDWARE: "- GPU"})

        assert merged == "# Summary\n\nOld overview\n\n# Hardware\n\n- GPU"

    def test_keyword_in_stored_body_collapses_section(self):
        """A body line containing a keyword re-opens that section with an empty body."""
        content = "# Summary\nOld summary\n# Hardware\n- CPU"

        merged = merge_section_updates(content, {SectionKey.HARDWARE: "- GPU"})

        assert merged == "# Hardware\n\n- GPU"

    def test_empty_update_removes_section(self):
        content = "# Summary\nOld overview\n# Hardware\n- CPU"

        merged = merge_section_updates(content, {"summary": ""})

        assert merged == "# Hardware\n\n- CPU"

    def test_update_adds_missing_section(self):
        merged = merge_section_updates("", {SectionKey.NETWORK: "VLAN 10"})

        assert merged == "# Network\n\nVLAN 10"

    def test_none_content(self):
        assert merge_section_updates(None, {}) == ""
