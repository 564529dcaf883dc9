from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from domain.project import project_router
from app.config import APP_TITLE, CORS_ORIGINS
from app.logging_config import get_logger, setup_logging_from_env

# 로깅 초기화
setup_logging_from_env()
logger = get_logger("main")

app = FastAPI(title=APP_TITLE)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(project_router.router)


@app.on_event("startup")
async def startup_event():
    """앱 시작시 실행되는 초기화 작업"""
    logger.info("Starting Project Documentation API server...")

    # 데이터베이스 초기화
    try:
        from database import engine, Base
        import models  # 모든 모델 등록

        Base.metadata.create_all(bind=engine)
        logger.info("Database tables initialized")

    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)
        # 데이터베이스 초기화 실패해도 서버는 시작 (개발환경 고려)

    logger.info("Project Documentation API server started successfully")


@app.on_event("shutdown")
async def shutdown_event():
    """앱 종료시 정리 작업"""
    logger.info("Project Documentation API server stopped")
