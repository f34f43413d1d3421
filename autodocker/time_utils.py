"""时间工具函数模块"""

from datetime import datetime, timezone
from typing import Optional

from .constants import TIMESTAMP_FORMAT


def get_timestamp(now: Optional[datetime] = None) -> str:
    """
    获取UTC时间戳，格式为YYYY-MM-DDTHH-MM-SSZ

    定长且补零，因此字符串顺序即时间顺序。

    Args:
        now: 指定时刻，默认为当前时间；不带时区的时间按UTC处理

    Returns:
        格式化的时间戳字符串
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def parse_timestamp(value: str) -> datetime:
    """
    将时间戳字符串解析为带时区的UTC时间

    Raises:
        ValueError: 格式不匹配时抛出
    """
    return datetime.strptime(value, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)
