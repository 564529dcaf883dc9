"""
문서 섹션 분리 모듈

저장된 프로젝트 문서(content) 하나를 섹션별 본문으로 나눕니다.
"""

from typing import Dict, List, Optional

from .section_registry import HeadingMatcher, SectionKey, empty_section_map, match_heading


def split_sections(content: Optional[str], matcher: HeadingMatcher = match_heading) -> Dict[SectionKey, str]:
    """
    문서를 섹션 맵으로 분리

    처리 규칙:
    1. 제목 줄은 구분자로만 쓰이고 어느 섹션 본문에도 포함되지 않음
    2. 첫 제목 이전의 내용은 버림
    3. 같은 제목이 다시 나오면 마지막 본문으로 덮어씀
    4. 찾지 못한 섹션은 빈 문자열

    Args:
        content: 저장된 문서 문자열 (None 이면 빈 문서로 취급)
        matcher: 제목 줄 판별 함수

    Returns:
        6개 섹션 키가 모두 포함된 맵
    """
    sections = empty_section_map()
    current: Optional[SectionKey] = None
    buffer: List[str] = []

    for line in (content or "").split('\n'):
        key = matcher(line)
        if key is None:
            if current is not None:
                buffer.append(line)
            continue

        if current is not None:
            sections[current] = '\n'.join(buffer).strip()
        current = key
        buffer = []

    if current is not None:
        sections[current] = '\n'.join(buffer).strip()

    return sections
