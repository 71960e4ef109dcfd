# -*- coding: utf-8 -*-
import logging
import logging.handlers
import os
import sys
from datetime import datetime
from enum import Enum

import pytz

from kol_helper import settings

LOGGER_NAME = "kol_helper"


# --- Log Type Definition ---
class LogType(Enum):
    CMD_SENT = "cmd_sent"
    SYSTEM = "system_activity"
    DEBUG = "debug_log"
    WARNING = "warning" # Generic warning
    ERROR = "error"     # Generic error


# --- Formatter ---
class TimezoneFormatter(logging.Formatter):
    def __init__(self, fmt, datefmt=None, tz_name='UTC'):
        super().__init__(fmt, datefmt)
        self.tz = pytz.timezone(tz_name)

    def formatTime(self, record, datefmt=None):
        dt = datetime.fromtimestamp(record.created, self.tz)
        if datefmt:
            return dt.strftime(datefmt)
        return dt.isoformat()


class UnbufferedStreamHandler(logging.StreamHandler):
    def emit(self, record):
        super().emit(record)
        self.flush()


LINE_WIDTH = 50

def get_display_width(text: str) -> int:
    width = 0
    for char in text:
        if '\u4e00' <= char <= '\u9fff' or char in '，。？！；：《》【】':
            width += 2
        else:
            width += 1
    return width

def format_and_log(log_type: LogType, title: str, data: dict, level=logging.INFO):
    """
    统一的日志格式化与输出函数。
    它会检查配置中的开关，决定是否记录该类型的日志。
    """
    log_switch_name = log_type.value
    if not settings.LOGGING_SWITCHES.get(log_switch_name, True):
        return

    logger = logging.getLogger(LOGGER_NAME)
    top_border = "┌" + "─" * LINE_WIDTH
    middle_border = "├" + "─" * LINE_WIDTH
    bottom_border = "└" + "─" * LINE_WIDTH
    title_line = f"│ [ {title} ]"
    body_lines = []
    if data:
        filtered_data = {k: v for k, v in data.items() if v is not None}
        if filtered_data:
            max_key_width = max(get_display_width(str(key)) for key in filtered_data.keys())
            for key, value in filtered_data.items():
                padding = " " * (max_key_width - get_display_width(str(key)))
                value_lines = str(value).split('\n')
                body_lines.append(f"│ {key}{padding} : {value_lines[0]}")
                indent = " " * (max_key_width + 4)
                for line in value_lines[1:]:
                    body_lines.append(f"│ {indent}{line}")

    full_log_message = f"\n{top_border}\n{title_line}"
    if body_lines:
        full_log_message += f"\n{middle_border}\n" + "\n".join(body_lines)
    full_log_message += f"\n{bottom_border}"

    logger.log(level, full_log_message)


def setup_logging(log_dir: str = settings.LOG_DIR):
    """
    为使用本库的脚本配置日志：控制台输出 + 按大小轮转的常规/错误日志文件。
    库本身只负责写日志，是否调用由上层脚本决定。
    """
    app_logger = logging.getLogger(LOGGER_NAME)
    if app_logger.hasHandlers(): app_logger.handlers.clear()

    log_level = logging.DEBUG if settings.LOGGING_SWITCHES.get('debug_log') else logging.INFO
    app_logger.setLevel(log_level)
    app_logger.propagate = False

    console_formatter = logging.Formatter(fmt='%(message)s')
    file_formatter = TimezoneFormatter(
        fmt='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S %Z',
        tz_name=settings.TZ
    )

    stream_handler = UnbufferedStreamHandler(sys.stdout)
    stream_handler.setFormatter(console_formatter)
    app_logger.addHandler(stream_handler)

    os.makedirs(log_dir, exist_ok=True)

    class InfoFilter(logging.Filter):
        def filter(self, record):
            return record.levelno <= logging.WARNING

    main_log_handler = logging.handlers.RotatingFileHandler(
        os.path.join(log_dir, os.path.basename(settings.LOG_FILE)),
        maxBytes=settings.LOG_ROTATION_CONFIG['max_bytes'],
        backupCount=settings.LOG_ROTATION_CONFIG['backup_count'],
        encoding='utf-8'
    )
    main_log_handler.setFormatter(file_formatter)
    main_log_handler.addFilter(InfoFilter())
    app_logger.addHandler(main_log_handler)

    error_log_handler = logging.handlers.RotatingFileHandler(
        os.path.join(log_dir, os.path.basename(settings.ERROR_LOG_FILE)),
        maxBytes=settings.LOG_ROTATION_CONFIG['max_bytes'],
        backupCount=settings.LOG_ROTATION_CONFIG['backup_count'],
        encoding='utf-8'
    )
    error_log_handler.setFormatter(file_formatter)
    error_log_handler.setLevel(logging.ERROR)
    app_logger.addHandler(error_log_handler)

    logging.getLogger('redis').setLevel(logging.WARNING)

    format_and_log(LogType.SYSTEM, "日志系统", {'常规日志': main_log_handler.baseFilename, '错误日志': error_log_handler.baseFilename})
    return app_logger
