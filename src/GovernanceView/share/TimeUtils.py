import logging
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from GovernanceView.dto.DateTimeDisplayDto import DateTimeDisplayDto

logger = logging.getLogger("governance_view.time_utils")


class TimeUtils:
    """
    一个用于处理时间相关操作的工具类。
    """

    @staticmethod
    def to_local_datetime(timestamp: int | None, target_tz: str | None = None) -> datetime:
        """
        将 Unix 时间戳（秒）转换为目标时区下的 datetime。

        Args:
            timestamp: Unix 时间戳。None、0 或超出范围的值都按纪元时间处理。
            target_tz: 目标时区的 IANA 名称，例如 "Asia/Shanghai"。为 None 时使用本机时区。

        Returns:
            目标时区下的 datetime 对象。
        """
        seconds = int(timestamp or 0)
        target_zone = None
        if target_tz is not None:
            try:
                target_zone = ZoneInfo(target_tz)
            except (ZoneInfoNotFoundError, ValueError):
                logger.warning(f"无效的时区 '{target_tz}'。将回退到 UTC。")
                target_zone = ZoneInfo("UTC")

        try:
            return datetime.fromtimestamp(seconds, tz=target_zone)
        except (OverflowError, OSError, ValueError):
            logger.warning(f"时间戳 {seconds} 超出可表示范围。将回退到纪元时间。")
            return datetime.fromtimestamp(0, tz=target_zone)

    @staticmethod
    def format_date(timestamp: int | None, target_tz: str | None = None) -> str:
        """
        格式化日期，例如 "March 7, 2023"。
        """
        date = TimeUtils.to_local_datetime(timestamp, target_tz)
        return f"{date.strftime('%B')} {date.day}, {date.year}"

    @staticmethod
    def format_time(timestamp: int | None, target_tz: str | None = None) -> str:
        """
        格式化 12 小时制时间，例如 "3:7 PM"。

        小时与分钟均不补零；0 点和 12 点都显示为 0，而不是 12。
        这是沿用旧页面的显示行为，修改前需要先确认期望的格式。
        """
        date = TimeUtils.to_local_datetime(timestamp, target_tz)
        hours = date.hour % 12
        suffix = "PM" if date.hour >= 12 else "AM"
        return f"{hours}:{date.minute} {suffix}"

    @staticmethod
    def format_timestamp(timestamp: int | None, target_tz: str | None = None) -> DateTimeDisplayDto:
        """同时生成日期与时间两段展示文本。"""
        return DateTimeDisplayDto(
            date=TimeUtils.format_date(timestamp, target_tz),
            time=TimeUtils.format_time(timestamp, target_tz),
        )
