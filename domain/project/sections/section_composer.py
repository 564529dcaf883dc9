"""
문서 섹션 결합 모듈

편집된 섹션 맵을 다시 하나의 문서 문자열로 합칩니다.
"""

from typing import List, Mapping, Optional

from .section_parser import split_sections
from .section_registry import SECTION_REGISTRY, HeadingMatcher, match_heading


def compose_sections(sections: Mapping[str, Optional[str]]) -> str:
    """
    섹션 맵을 정식 제목이 붙은 문서로 결합

    레지스트리 순서대로 비어있지 않은 섹션만 출력합니다.
    원래 문서의 제목 문구는 유지되지 않고 정식 제목으로 바뀝니다.
    """
    blocks: List[str] = []
    for spec in SECTION_REGISTRY:
        body = (sections.get(spec.key) or "").strip()
        if not body:
            continue
        blocks.append(f"{spec.title}\n\n{body}")
    return "\n\n".join(blocks)


def merge_section_updates(
    content: Optional[str],
    updates: Mapping[str, Optional[str]],
    matcher: HeadingMatcher = match_heading
) -> str:
    """업데이트된 섹션만 교체하고 나머지는 저장된 본문 유지"""
    sections = split_sections(content, matcher)
    for spec in SECTION_REGISTRY:
        if spec.key in updates:
            sections[spec.key] = updates[spec.key] or ""
    return compose_sections(sections)
