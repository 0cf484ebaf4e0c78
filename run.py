#!/usr/bin/env python3
"""
本地启动入口：同时输出到控制台和 logs/ 下按启动时间命名的日志文件
"""
import logging
import os
from datetime import datetime

import uvicorn

from app.core.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging() -> str:
    """配置根日志记录器，返回本次日志文件路径"""
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_filename = os.path.join(settings.LOG_DIR, f"goods_admin_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [logging.StreamHandler(), logging.FileHandler(log_filename, encoding='utf-8')]

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.LOG_LEVEL)
    # 清除可能已存在的处理器
    root_logger.handlers = []
    for handler in handlers:
        handler.setLevel(settings.LOG_LEVEL)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # reload 模式下文件监听的日志过于频繁
    logging.getLogger('watchfiles').setLevel(logging.ERROR)
    return log_filename


def main():
    log_filename = setup_logging()
    logger = logging.getLogger(__name__)
    logger.info(f"启动 {settings.PROJECT_NAME} - 监听 {settings.HOST}:{settings.PORT}")
    logger.info(f"数据库: {settings.DB_HOST}:{settings.DB_PORT}/{settings.DB_NAME}")
    logger.info(f"日志文件路径: {log_filename}")
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)


if __name__ == "__main__":
    main()
