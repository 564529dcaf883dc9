"""
문서 섹션 레지스트리

프로젝트 문서(content)를 나누는 6개의 고정 섹션과 각 섹션의
제목 매칭 규칙, 정식 제목을 한 곳에서 관리합니다.
분리(split)와 결합(compose)은 모두 이 레지스트리 순서를 따릅니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Sequence


class SectionKey(str, Enum):
    """문서 섹션 식별자 (선언 순서 = 결합 순서)"""
    PROJECT_DOCUMENTATION = "projectDocumentation"
    SUMMARY = "summary"
    HARDWARE = "hardware"
    NETWORK = "network"
    SOFTWARE = "software"
    INSTALLATION_DEPLOYMENT = "installationDeployment"


# 소문자 + trim 된 줄을 받아 해당 섹션 제목인지 판단
LinePredicate = Callable[[str], bool]


@dataclass(frozen=True)
class SectionSpec:
    """섹션 하나의 정의"""
    key: SectionKey
    title: str
    matches: LinePredicate


def keyword_predicate(*keywords: str) -> LinePredicate:
    """모든 키워드가 줄 안에 포함될 때 True 를 반환하는 조건 생성"""
    lowered = tuple(k.lower() for k in keywords)

    def predicate(line: str) -> bool:
        return all(k in line for k in lowered)

    return predicate


SECTION_REGISTRY: Sequence[SectionSpec] = (
    SectionSpec(SectionKey.PROJECT_DOCUMENTATION, "# Project Documentation",
                keyword_predicate("project documentation")),
    SectionSpec(SectionKey.SUMMARY, "# Summary", keyword_predicate("summary")),
    SectionSpec(SectionKey.HARDWARE, "# Hardware", keyword_predicate("hardware")),
    SectionSpec(SectionKey.NETWORK, "# Network", keyword_predicate("network")),
    SectionSpec(SectionKey.SOFTWARE, "# Software", keyword_predicate("software")),
    SectionSpec(SectionKey.INSTALLATION_DEPLOYMENT, "# Installation & Deployment",
                keyword_predicate("installation", "deployment")),
)


# 줄 하나를 받아 섹션 키(또는 None)를 돌려주는 매처
HeadingMatcher = Callable[[str], Optional[SectionKey]]


def match_heading(line: str, registry: Sequence[SectionSpec] = SECTION_REGISTRY) -> Optional[SectionKey]:
    """
    줄이 섹션 제목인지 판단 (기본 매처)

    제목 기호(#) 유무와 상관없이 키워드가 줄 어디에든 포함되면 제목으로 봅니다.
    본문 문장 안에 키워드가 있어도 새 섹션이 시작되므로 주의가 필요합니다.
    여러 섹션에 동시에 해당하면 레지스트리 순서상 첫 섹션이 선택됩니다.
    """
    normalized = line.strip().lower()
    for spec in registry:
        if spec.matches(normalized):
            return spec.key
    return None


def match_marked_heading(line: str, registry: Sequence[SectionSpec] = SECTION_REGISTRY) -> Optional[SectionKey]:
    """'#' 으로 시작하는 줄만 제목으로 인정하는 엄격한 매처"""
    if not line.strip().startswith('#'):
        return None
    return match_heading(line, registry)


def empty_section_map() -> Dict[SectionKey, str]:
    """모든 섹션이 빈 문자열인 새 섹션 맵"""
    return {spec.key: "" for spec in SECTION_REGISTRY}
