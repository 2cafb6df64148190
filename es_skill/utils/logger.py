"""日志配置"""

import logging
from typing import Optional

from ..core.config import Config

LOGGER_NAME = "es_skill"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(config: Optional[Config] = None) -> logging.Logger:
    """根据配置设置 es_skill 日志级别

    debug=True 时强制 DEBUG。重复调用不会叠加 handler。

    Args:
        config: 配置对象，默认 Config()

    Returns:
        es_skill 根 logger
    """
    config = config or Config()
    level = logging.DEBUG if config.debug else logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
