from typing import Optional

from pydantic import BaseModel, Field


class LoadProposalPageQo(BaseModel):
    """
    加载提案页面的查询对象
    """

    governor: str = Field(..., description="Governor 合约地址")
    proposal_id: str = Field(..., description="提案 ID")
    viewer_balance: Optional[float] = Field(default=None, description="当前用户的代币余额")
    target_tz: Optional[str] = Field(default=None, description="展示用的时区，None 表示本机时区")
