"""
SQLAlchemy 모델 정의
"""
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, JSON, String, Text

from database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Project(Base):
    """프로젝트 문서 레코드

    content 는 섹션 제목으로 구분되는 문서 전체 문자열이며,
    installation_guide / source_code_url 은 섹션 처리 없이 그대로 저장됩니다.
    """
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    content = Column(Text, nullable=False, default="")
    installation_guide = Column(Text, nullable=True)
    source_code_url = Column(String(500), nullable=True)

    # draft / published / archived
    status = Column(String(20), nullable=False, default="draft", index=True)
    tags = Column(JSON, nullable=False, default=list)
    is_public = Column(Boolean, nullable=False, default=False)

    created_by = Column(String(100), nullable=True)
    last_modified_by = Column(String(100), nullable=True)
    created_at = Column(DateTime, nullable=False, default=_utcnow)
    last_modified = Column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)

    def __repr__(self):
        return f"<Project(id={self.id}, title='{self.title}', status='{self.status}')>"
