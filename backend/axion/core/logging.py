import logging
import sys
import structlog

def configure_logging(env: str = "dev") -> None:
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if env == "prod":
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=env == "dev")

    structlog.configure(
        processors=shared_processors + [renderer],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # tests only want warnings and above
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.WARNING if env == "test" else logging.INFO,
    )

def bind_user(login: str, roles: list[str]) -> None:
    structlog.contextvars.bind_contextvars(user=login, roles=",".join(roles))

logger = structlog.get_logger()
