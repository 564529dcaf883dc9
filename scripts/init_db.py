"""
데이터베이스 초기화 스크립트
SQLite 데이터베이스에 필요한 테이블들을 생성합니다.
"""
import sys
from pathlib import Path

# 프로젝트 루트를 Python path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from database import engine, Base
from app.logging_config import get_logger, setup_logging_from_env
import models  # 모든 모델을 임포트하여 Base.metadata에 등록

logger = get_logger("db_init")


def init_database(drop_existing: bool = False):
    """
    데이터베이스 테이블 초기화

    Args:
        drop_existing: 기존 테이블 삭제 여부
    """
    try:
        if drop_existing:
            logger.warning("Dropping existing tables...")
            Base.metadata.drop_all(bind=engine)
            logger.info("Existing tables dropped")

        logger.info("Creating database tables...")
        Base.metadata.create_all(bind=engine)

        table_names = list(Base.metadata.tables.keys())
        logger.info(f"Database initialized successfully with {len(table_names)} tables", extra={
            "tables": table_names
        })

        return True

    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)
        return False


def check_database_status():
    """데이터베이스 상태 확인"""
    try:
        from sqlalchemy import inspect

        inspector = inspect(engine)
        existing_tables = inspector.get_table_names()
        expected_tables = list(Base.metadata.tables.keys())
        missing = sorted(set(expected_tables) - set(existing_tables))

        logger.info("Database status check", extra={
            "existing_tables": existing_tables,
            "missing_tables": missing
        })

        if missing:
            logger.warning(f"Missing tables: {missing}")
            return False
        logger.info("All required tables exist")
        return True

    except Exception as e:
        logger.error(f"Database status check failed: {e}", exc_info=True)
        return False


def create_sample_data():
    """샘플 프로젝트 생성 (개발용)"""
    from database import SessionLocal
    from domain.project.sections import SectionKey, compose_sections

    session = SessionLocal()
    try:
        if session.query(models.Project).first():
            logger.info("Sample data already exists, skipping...")
            return True

        content = compose_sections({
            SectionKey.SUMMARY: "Sample project used for local development.",
            SectionKey.HARDWARE: "- 1x application server (4 vCPU, 8 GB RAM)",
            SectionKey.SOFTWARE: "- Python 3.11\n- SQLite",
            SectionKey.INSTALLATION_DEPLOYMENT: "1. Install requirements\n2. Run `uvicorn main:app`",
        })
        sample_project = models.Project(
            title="Sample Project",
            description="Seeded by scripts/init_db.py",
            content=content,
            status="draft",
            tags=["sample"],
            created_by="init_db",
        )
        session.add(sample_project)
        session.commit()

        logger.info("Sample data created successfully", extra={"project_id": sample_project.id})
        return True

    except Exception as e:
        logger.error(f"Sample data creation failed: {e}", exc_info=True)
        session.rollback()
        return False
    finally:
        session.close()


def main():
    """메인 실행 함수"""
    import argparse

    parser = argparse.ArgumentParser(description="Database initialization script")
    parser.add_argument("--drop", action="store_true", help="Drop existing tables before creating")
    parser.add_argument("--sample", action="store_true", help="Create sample data")
    parser.add_argument("--check", action="store_true", help="Check database status only")

    args = parser.parse_args()

    setup_logging_from_env()
    logger.info("Database initialization script started")

    if args.check:
        success = check_database_status()
        sys.exit(0 if success else 1)

    success = init_database(drop_existing=args.drop)
    if not success:
        logger.error("Database initialization failed")
        sys.exit(1)

    if args.sample:
        if not create_sample_data():
            logger.warning("Sample data creation failed, but database is initialized")

    logger.info("Database initialization completed successfully")


if __name__ == "__main__":
    main()
