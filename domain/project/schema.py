from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict, Literal
from datetime import datetime

from .sections import SectionKey

ProjectStatus = Literal["draft", "published", "archived"]


class CamelModel(BaseModel):
    """JSON 은 camelCase, 파이썬 쪽은 snake_case (둘 다 입력 허용)"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# 1. 프로젝트 응답 스키마
class ProjectResponse(CamelModel):
    id: int
    title: str
    description: str = ""
    content: str = ""  # 섹션 제목으로 구분된 문서 전체
    installation_guide: Optional[str] = None
    source_code_url: Optional[str] = None
    status: str
    tags: List[str] = []
    is_public: bool = False
    created_by: Optional[str] = None
    last_modified_by: Optional[str] = None
    created_at: Optional[datetime] = None
    last_modified: Optional[datetime] = None


def _require_title(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("Project title is required")
    return value


class ProjectCreate(CamelModel):
    title: str
    description: str = ""
    content: str = ""
    installation_guide: Optional[str] = None
    source_code_url: Optional[str] = None
    status: ProjectStatus = "draft"
    tags: List[str] = []
    is_public: bool = False
    created_by: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value):
        return _require_title(value)

    @field_validator("description")
    @classmethod
    def strip_description(cls, value):
        return value.strip()


class ProjectUpdate(CamelModel):
    """부분 업데이트 요청 (보내지 않은 필드는 변경하지 않음, null 은 nullable 필드만 비움)"""
    title: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    installation_guide: Optional[str] = None
    source_code_url: Optional[str] = None
    status: Optional[ProjectStatus] = None
    tags: Optional[List[str]] = None
    is_public: Optional[bool] = None
    last_modified_by: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value):
        return _require_title(value)


# 2. 섹션 편집 스키마
class ProjectSectionsResponse(CamelModel):
    project_id: int
    sections: Dict[SectionKey, str]


class SectionsUpdate(CamelModel):
    """전체 섹션 저장 요청 (누락된 섹션은 빈 섹션으로 취급)"""
    sections: Dict[SectionKey, str] = Field(default_factory=dict)
    installation_guide: Optional[str] = None
    source_code_url: Optional[str] = None
    last_modified_by: Optional[str] = None


class SectionsPatch(CamelModel):
    """일부 섹션만 교체하는 요청"""
    sections: Dict[SectionKey, str]
    last_modified_by: Optional[str] = None


class SectionsPreviewRequest(CamelModel):
    """저장 없이 결합 결과만 확인하는 요청 (sections 외 필드는 거부)"""
    sections: Dict[SectionKey, str] = Field(default_factory=dict)

    class Config:
        extra = "forbid"


class SectionsPreviewResponse(CamelModel):
    old_content: str
    new_content: str
    diff_lines: List[str]
