"""
로깅 설정 모듈

- get_logger: 모듈별 로거 생성 (docdash.* 네임스페이스)
- setup_logging / setup_logging_from_env: 핸들러/포맷 초기화
- 구조화 로그 헬퍼: log_project_event, log_error

사용 예:
    from app.logging_config import get_logger, setup_logging_from_env
    setup_logging_from_env()
    logger = get_logger("project_router")
"""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

ROOT_LOGGER_NAME = "docdash"

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# LogRecord 기본 속성 (extra 필드 추출 시 제외)
RESERVED_ATTRS = {
    "name", "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno", "funcName",
    "created", "msecs", "relativeCreated", "thread", "threadName",
    "processName", "process", "message", "asctime", "taskName",
}


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in RESERVED_ATTRS and not k.startswith("_")}


class JSONFormatter(logging.Formatter):
    """로그 레코드를 한 줄 JSON 으로 출력"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra = _extra_fields(record)
        if extra:
            log_data["extra"] = extra

        return json.dumps(log_data, ensure_ascii=False, default=str)


class TextFormatter(logging.Formatter):
    """사람이 읽기 쉬운 형식 (extra 필드는 뒤에 key=value 로 붙임)"""

    def __init__(self):
        super().__init__(TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        extra = _extra_fields(record)
        if extra:
            message += " | " + " ".join(f"{k}={v}" for k, v in extra.items())
        return message


def get_logger(name: str) -> logging.Logger:
    """docdash 네임스페이스 하위 로거 반환"""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(level: str = "INFO", json_format: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    docdash 루트 로거 초기화

    Args:
        level: 로그 레벨 이름
        json_format: True 면 JSON 한 줄 포맷
        log_file: 지정 시 파일 핸들러 추가

    Returns:
        설정된 루트 로거
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # 재호출 시 핸들러 중복 방지
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    formatter: logging.Formatter = JSONFormatter() if json_format else TextFormatter()

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    root.propagate = False
    return root


def setup_logging_from_env() -> logging.Logger:
    """LOG_LEVEL / LOG_FORMAT / LOG_FILE 환경설정으로 초기화"""
    from app.config import LOG_LEVEL, LOG_FORMAT, LOG_FILE

    return setup_logging(level=LOG_LEVEL, json_format=(LOG_FORMAT == "json"), log_file=LOG_FILE)


def log_project_event(project_id: Any, action: str, **context: Any) -> None:
    """프로젝트 저장/조회 이벤트 기록"""
    get_logger("events").info(
        f"Project {project_id}: {action}",
        extra={"project_id": project_id, "action": action, **context}
    )


def log_error(message: str, error: Exception, **context: Any) -> None:
    """예외를 스택트레이스와 함께 기록"""
    get_logger("errors").error(
        f"{message}: {error}",
        exc_info=error,
        extra={"error_type": type(error).__name__, **context}
    )
