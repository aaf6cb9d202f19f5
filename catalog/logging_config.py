"""로깅 설정 모듈.

Logging configuration for the application.
``setup_logging`` configures the root logger once with a console handler and,
when Axiom credentials are configured, an Axiom handler that ships every
record to the configured dataset.
"""

import logging

from axiom_py import Client as AxiomClient
from axiom_py.logging import AxiomHandler

from catalog.config import settings

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None) -> None:
    """루트 로거를 설정합니다.

    Configure the root logger. Does nothing if handlers are already attached,
    so repeated calls (tests, repeated demo runs) keep a single configuration.

    Args:
        level: 로그 레벨 이름, None이면 settings.LOG_LEVEL 사용
               (Level name; falls back to settings.LOG_LEVEL)
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    level_name: str = (level or settings.LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(fmt=_LOG_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(console_handler)

    # Axiom 미설정시 콘솔만 사용 — Console only if Axiom is not configured
    if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
        client = AxiomClient(token=settings.AXIOM_API_TOKEN)
        logger.addHandler(AxiomHandler(client, settings.AXIOM_DATASET))
