"""Telemetry - 统一日志入口

提供统一的日志工厂和日志初始化。

日志格式: [logger name] msg，消息本身以 [Component] 开头
"""

import logging

from . import config

# 全局日志配置
_LOG_FORMAT = "[%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """获取带模块前缀的 logger

    Args:
        name: 模块名（通常使用 __name__）

    Returns:
        Logger 实例
    """
    return logging.getLogger(name)


def setup_logging(level: str | int | None = None) -> None:
    """初始化根 logger

    Args:
        level: 日志级别，默认使用 config.LOG_LEVEL
    """
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=_LOG_FORMAT)
    logging.getLogger("pulselayout").setLevel(level)
