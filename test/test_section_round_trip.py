"""Property-based round-trip tests for section split/compose using Hypothesis."""

from hypothesis import given, strategies as st, settings

from domain.project.sections import (
    SectionKey,
    compose_sections,
    match_heading,
    split_sections,
)

# 's', 'h', 'n', 'r' 을 빼서 어떤 섹션 키워드도 만들 수 없는 본문
BODY_ALPHABET = "abcdefgijklmopqtuvwxyz0123456789 .,:-*`#\t\n"

bodies = st.text(alphabet=BODY_ALPHABET, max_size=80)
section_maps = st.dictionaries(st.sampled_from(list(SectionKey)), bodies)


def _normalized(sections):
    return {key: (sections.get(key) or "").strip() for key in SectionKey}


class TestSectionRoundTrip:
    """Round-trip properties between split and compose."""

    @given(sections=section_maps)
    @settings(max_examples=200)
    def test_split_recovers_trimmed_bodies(self, sections):
        assert split_sections(compose_sections(sections)) == _normalized(sections)

    @given(sections=section_maps)
    @settings(max_examples=100)
    def test_compose_is_idempotent_after_split(self, sections):
        composed = compose_sections(sections)

        assert compose_sections(split_sections(composed)) == composed

    @given(content=st.text(max_size=300))
    @settings(max_examples=200)
    def test_split_always_returns_every_key(self, content):
        result = split_sections(content)

        assert set(result) == set(SectionKey)
        assert all(isinstance(body, str) for body in result.values())

    @given(content=st.text(max_size=300))
    @settings(max_examples=100)
    def test_split_then_compose_is_stable(self, content):
        composed = compose_sections(split_sections(content))

        assert compose_sections(split_sections(composed)) == composed

    @given(body=bodies)
    def test_body_alphabet_never_forms_a_heading(self, body):
        assert all(match_heading(line) is None for line in body.split("\n"))
