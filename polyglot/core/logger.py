import json
import logging
import os
import sys
from typing import List, Optional

from agno.utils.log import configure_agno_logging

from .config import Settings, settings

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# 已配置过的 logger 名称，重复配置时先清掉旧 handler
_configured_loggers = set()


class JsonFormatter(logging.Formatter):
    """
    每条日志输出一行 JSON。

    上游错误信息里经常带引号和换行，这里用 json.dumps 转义，保证每行都能被解析。
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _resolve_level(level: str) -> int:
    log_level = getattr(logging, level.upper(), None)
    return log_level if isinstance(log_level, int) else logging.INFO


def _build_handlers(config: Settings, log_level: int) -> List[logging.Handler]:
    formatter = JsonFormatter() if config.LOG_FORMAT == "json" else logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.LOG_FILE:
        log_dir = os.path.dirname(config.LOG_FILE)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(config.LOG_FILE, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
    return handlers


def _create_logger(name: str, level: Optional[str] = None, config: Settings = settings) -> logging.Logger:
    """创建配置好的日志记录器"""
    logger = logging.getLogger(name)

    if name in _configured_loggers:
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()

    log_level = _resolve_level(level or config.LOG_LEVEL)
    logger.setLevel(log_level)
    for handler in _build_handlers(config, log_level):
        logger.addHandler(handler)

    # 防止日志传播到根日志记录器
    logger.propagate = False

    _configured_loggers.add(name)
    return logger


def setup_agno_logging(config: Settings = settings) -> logging.Logger:
    """
    模型调用时 agno 写的是它的默认 logger，把它接到和应用相同的 handler 上。
    """
    agno_logger = _create_logger("agno", config.LOG_LEVEL, config)
    configure_agno_logging(custom_default_logger=agno_logger)
    return agno_logger


def get_logger(name: str, level: Optional[str] = None, config: Settings = settings) -> logging.Logger:
    """获取配置好的应用程序日志记录器（用于非 Agno 组件）"""
    return _create_logger(name, level, config)


setup_agno_logging()
pal_logger = get_logger("polyglot")
