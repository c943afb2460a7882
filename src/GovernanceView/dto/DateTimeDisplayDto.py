from pydantic import BaseModel, ConfigDict, Field


class DateTimeDisplayDto(BaseModel):
    """
    一个时间点的日期与时间展示文本
    """

    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="日期，例如 March 7, 2023")
    time: str = Field(..., description="时间，例如 3:7 PM")
