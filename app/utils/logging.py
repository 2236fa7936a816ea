"""structlog 로깅 설정 모듈.

Logging configuration for the application.
Configures structlog once at startup; modules obtain loggers via ``get_logger``.
"""

import logging

import structlog

from app.config import settings

# 시끄러운 라이브러리 로거 억제 — Suppress noisy library loggers
logging.getLogger("sqlalchemy.engine.Engine").setLevel(logging.WARNING)


def configure_logging() -> None:
    """structlog 프로세서 체인과 최소 레벨을 설정합니다.

    Configure the structlog processor chain and minimum level from settings.
    Uses a JSON renderer when ``LOG_JSON`` is set, otherwise a console renderer.
    """
    level: int = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_JSON
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """이름이 지정된 structlog 로거를 반환합니다 (Return a named structlog logger)."""
    return structlog.get_logger(name)
