"""
프로젝트 문서 섹션 모듈

저장된 문서를 섹션별로 분리하고, 편집된 섹션을 다시 결합합니다.
"""

from .section_registry import (
    SectionKey,
    SectionSpec,
    SECTION_REGISTRY,
    keyword_predicate,
    match_heading,
    match_marked_heading,
    empty_section_map
)

from .section_parser import split_sections

from .section_composer import (
    compose_sections,
    merge_section_updates
)

__all__ = [
    'SectionKey',
    'SectionSpec',
    'SECTION_REGISTRY',
    'keyword_predicate',
    'match_heading',
    'match_marked_heading',
    'empty_section_map',
    'split_sections',
    'compose_sections',
    'merge_section_updates',
]
