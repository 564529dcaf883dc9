"""
# Project Documentation API

프로젝트 문서 관리 API입니다.

## 주요 기능
- **프로젝트 관리**: 프로젝트 생성, 조회, 목록, 수정, 삭제
- **섹션 편집**: 저장된 문서(content)를 섹션별로 분리해 편집하고 다시 결합해 저장
- **저장 미리보기**: 섹션 결합 결과와 기존 문서의 차이(diff) 확인

## 섹션 편집 워크플로우
1. `GET /projects/{id}/sections` 로 섹션 맵 로드
2. 클라이언트에서 섹션별 편집
3. `PUT /projects/{id}/sections` (전체) 또는 `PATCH` (일부) 로 저장
4. 섹션은 정식 제목(`# Summary` 등)으로 결합되어 content 에 저장됨
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from sqlalchemy import String, cast, or_
from sqlalchemy.orm import Session
from typing import List, Optional
import difflib

from .schema import (
    ProjectStatus,
    ProjectResponse,
    ProjectCreate,
    ProjectUpdate,
    ProjectSectionsResponse,
    SectionsUpdate,
    SectionsPatch,
    SectionsPreviewRequest,
    SectionsPreviewResponse,
)
from .sections import split_sections, compose_sections, merge_section_updates
from database import get_db
from models import Project
from app.logging_config import get_logger, log_project_event, log_error

NULLABLE_FIELDS = {"installation_guide", "source_code_url", "last_modified_by"}

logger = get_logger("project_router")
router = APIRouter(
    prefix="/projects",
    tags=["Projects"],
    responses={
        500: {"description": "Internal server error"},
    }
)


def _get_project_or_404(db: Session, project_id: int) -> Project:
    project = db.query(Project).filter(Project.id == project_id).first()
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project


def _commit(db: Session, project: Project, action: str) -> ProjectResponse:
    """변경사항 커밋 후 응답 변환 (실패 시 롤백)"""
    try:
        db.commit()
        db.refresh(project)
    except Exception as e:
        db.rollback()
        log_error(f"Failed to {action} project", e, project_id=project.id)
        raise HTTPException(status_code=500, detail=str(e))

    log_project_event(project.id, action, content_length=len(project.content or ""))
    return ProjectResponse.model_validate(project)


@router.get(
    "/",
    response_model=List[ProjectResponse],
    summary="프로젝트 목록 조회",
    description="검색어, 상태 필터와 페이징을 지원합니다. 최신 생성 순으로 정렬됩니다.",
)
async def list_projects(
    search: Optional[str] = Query(None, description="제목, 설명, 태그 검색어 (대소문자 무시)"),
    status: Optional[ProjectStatus] = Query(None, description="프로젝트 상태"),
    limit: int = Query(50, ge=1, le=100, description="조회 개수"),
    offset: int = Query(0, ge=0, description="시작 위치"),
    db: Session = Depends(get_db)
):
    try:
        query = db.query(Project)
        if search:
            query = query.filter(or_(
                Project.title.icontains(search, autoescape=True),
                Project.description.icontains(search, autoescape=True),
                cast(Project.tags, String).icontains(search, autoescape=True),
            ))
        if status:
            query = query.filter(Project.status == status)

        projects = query.order_by(Project.created_at.desc(), Project.id.desc()).offset(offset).limit(limit).all()

        logger.info(f"Projects listed: {len(projects)} items", extra={"search": search, "status_filter": status})
        return [ProjectResponse.model_validate(p) for p in projects]

    except Exception as e:
        log_error("Error listing projects", e)
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "/",
    response_model=ProjectResponse,
    status_code=201,
    summary="프로젝트 생성",
    description="새 프로젝트를 만듭니다. 제목은 공백을 제거한 뒤 비어 있으면 안 됩니다.",
)
async def create_project(create_req: ProjectCreate, db: Session = Depends(get_db)):
    project = Project(**create_req.model_dump())
    db.add(project)
    try:
        db.commit()
        db.refresh(project)
    except Exception as e:
        db.rollback()
        log_error("Error creating project", e, title=create_req.title)
        raise HTTPException(status_code=500, detail=str(e))

    log_project_event(project.id, "created", title=project.title)
    return ProjectResponse.model_validate(project)


@router.get(
    "/{project_id}",
    response_model=ProjectResponse,
    summary="프로젝트 조회",
    responses={404: {"description": "프로젝트를 찾을 수 없음"}},
)
async def read_project(project_id: int, db: Session = Depends(get_db)):
    try:
        project = _get_project_or_404(db, project_id)
        logger.info(f"Project retrieved: {project_id}")
        return ProjectResponse.model_validate(project)
    except HTTPException:
        raise
    except Exception as e:
        log_error(f"Error retrieving project {project_id}", e)
        raise HTTPException(status_code=500, detail=str(e))


@router.put(
    "/{project_id}",
    response_model=ProjectResponse,
    summary="프로젝트 수정",
    description="""
    전달된 필드만 갱신합니다 (`content`, `installationGuide`, `sourceCodeUrl` 등).
    `content` 는 섹션 처리 없이 그대로 저장됩니다.
    """,
)
async def update_project(
        project_id: int,
        update_req: ProjectUpdate,
        db: Session = Depends(get_db)
):
    project = _get_project_or_404(db, project_id)

    # null 은 nullable 컬럼만 비우고, 나머지 필드에서는 무시
    changes = {
        field: value
        for field, value in update_req.model_dump(exclude_unset=True).items()
        if value is not None or field in NULLABLE_FIELDS
    }
    if not changes:
        raise HTTPException(status_code=400, detail="No fields to update")

    for field, value in changes.items():
        setattr(project, field, value)

    return _commit(db, project, "updated")


@router.delete(
    "/{project_id}",
    summary="프로젝트 삭제",
    responses={404: {"description": "프로젝트를 찾을 수 없음"}},
)
async def delete_project(project_id: int, db: Session = Depends(get_db)):
    project = _get_project_or_404(db, project_id)
    try:
        db.delete(project)
        db.commit()
    except Exception as e:
        db.rollback()
        log_error(f"Error deleting project {project_id}", e)
        raise HTTPException(status_code=500, detail=str(e))

    log_project_event(project_id, "deleted")
    return {"message": "Project deleted successfully"}


@router.get(
    "/{project_id}/sections",
    response_model=ProjectSectionsResponse,
    summary="섹션별 문서 조회",
    description="""
    저장된 문서를 섹션 맵으로 분리해 반환합니다. 6개 섹션 키가 항상 포함됩니다.

    ### 주의사항
    - 키워드가 포함된 줄은 위치와 상관없이 섹션 제목으로 인식됩니다
    - 첫 섹션 제목 이전의 내용은 반환되지 않습니다
    """,
)
async def read_project_sections(project_id: int, db: Session = Depends(get_db)):
    project = _get_project_or_404(db, project_id)
    sections = split_sections(project.content)

    logger.info(
        f"Project sections loaded: {project_id}",
        extra={"project_id": project_id, "filled_sections": sum(1 for body in sections.values() if body)},
    )
    return ProjectSectionsResponse(project_id=project.id, sections=sections)


@router.put(
    "/{project_id}/sections",
    response_model=ProjectResponse,
    summary="섹션 전체 저장",
    description="""
    섹션 맵을 하나의 문서로 결합해 `content` 에 저장합니다.
    요청에 없는 섹션과 비어 있는 섹션은 문서에서 제외됩니다.
    """,
)
async def save_project_sections(
        project_id: int,
        update_req: SectionsUpdate,
        db: Session = Depends(get_db)
):
    project = _get_project_or_404(db, project_id)

    project.content = compose_sections(update_req.sections)
    if update_req.installation_guide is not None:
        project.installation_guide = update_req.installation_guide
    if update_req.source_code_url is not None:
        project.source_code_url = update_req.source_code_url
    if update_req.last_modified_by is not None:
        project.last_modified_by = update_req.last_modified_by

    return _commit(db, project, "sections saved")


@router.patch(
    "/{project_id}/sections",
    response_model=ProjectResponse,
    summary="섹션 일부 저장",
    description="요청에 포함된 섹션만 교체하고 나머지 섹션은 저장된 본문을 유지합니다.",
)
async def patch_project_sections(
        project_id: int,
        patch_req: SectionsPatch,
        db: Session = Depends(get_db)
):
    project = _get_project_or_404(db, project_id)

    if not patch_req.sections:
        raise HTTPException(status_code=400, detail="No sections to update")

    project.content = merge_section_updates(project.content, patch_req.sections)
    if patch_req.last_modified_by is not None:
        project.last_modified_by = patch_req.last_modified_by

    return _commit(db, project, "sections patched")


@router.post(
    "/{project_id}/sections/preview",
    response_model=SectionsPreviewResponse,
    summary="섹션 저장 미리보기",
    description="""
    저장하지 않고 결합 결과와 현재 문서의 차이를 반환합니다.

    ### 반환값 설명
    - **oldContent**: 현재 저장된 문서
    - **newContent**: 섹션 결합 결과
    - **diffLines**: 줄 단위 unified diff (`+` 추가, `-` 삭제, ` ` 유지)
    """,
)
async def preview_project_sections(
        project_id: int,
        preview_req: SectionsPreviewRequest,
        db: Session = Depends(get_db)
):
    project = _get_project_or_404(db, project_id)

    old_content = project.content or ""
    new_content = compose_sections(preview_req.sections)

    diff_lines = list(difflib.unified_diff(
        old_content.splitlines(),
        new_content.splitlines(),
        fromfile='Saved Version',
        tofile='Edited Version',
        lineterm=''
    ))

    return SectionsPreviewResponse(old_content=old_content, new_content=new_content, diff_lines=diff_lines)
