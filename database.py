"""
데이터베이스 연결 설정 (SQLAlchemy)
"""
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base, Session

from app.config import DATABASE_URL

# SQLite 는 요청 스레드가 달라도 같은 연결을 쓸 수 있도록 허용
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """요청 단위 DB 세션 의존성"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
