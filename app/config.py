"""
애플리케이션 설정

환경변수(.env 포함)에서 설정값을 읽어 모듈 상수로 제공합니다.
"""
import os
from dotenv import load_dotenv

load_dotenv()

APP_TITLE = os.getenv("APP_TITLE", "Project Documentation API")

# 데이터베이스
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./docdash.db")

# CORS 허용 origin (쉼표 구분)
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://127.0.0.1:5173,http://localhost:5173").split(",")
    if origin.strip()
]

# 로깅
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "text").lower()
LOG_FILE = os.getenv("LOG_FILE") or None
