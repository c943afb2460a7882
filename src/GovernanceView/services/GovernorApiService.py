import logging
from typing import Any, List

from pydantic import ValidationError

from GovernanceView.dto.ProposalDto import ProposalDto
from GovernanceView.dto.VoteDto import VoteDto
from GovernanceView.share.HttpClient import HttpClient

logger = logging.getLogger(__name__)


class GovernorApiService:
    """
    通过 HTTP 接口读取提案与投票记录。
    """

    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    def _proposals_url(self, governor: str) -> str:
        return f"{self.base_url}/api/governor/{governor}/proposals"

    def _votes_url(self, governor: str, proposal_id: str) -> str:
        return f"{self.base_url}/api/governor/{governor}/votes/{proposal_id}"

    @staticmethod
    def _expect_list(payload: Any, what: str) -> list:
        if not isinstance(payload, list):
            raise ValueError(f"{what} 接口返回的不是列表: {type(payload).__name__}")
        return payload

    async def get_all_proposals(self, governor: str) -> List[ProposalDto]:
        """
        获取 Governor 合约下的所有提案，按接口给出的顺序（从新到旧）返回。

        Raises:
            aiohttp.ClientError: 请求失败。
            ValueError: 返回内容无法解析为提案列表。
        """
        url = self._proposals_url(governor)
        logger.debug(f"正在获取提案列表: {url}")
        payload = self._expect_list(await HttpClient.get_json(url), "提案")
        try:
            return [ProposalDto.model_validate(item) for item in payload]
        except ValidationError as e:
            raise ValueError(f"提案数据格式错误: {e}") from e

    async def get_votes(self, governor: str, proposal_id: str) -> List[VoteDto]:
        """
        获取某个提案的全部投票记录。

        Raises:
            aiohttp.ClientError: 请求失败。
            ValueError: 返回内容无法解析为投票记录列表。
        """
        url = self._votes_url(governor, proposal_id)
        logger.debug(f"正在获取投票记录: {url}")
        payload = self._expect_list(await HttpClient.get_json(url), "投票")
        try:
            return [VoteDto.model_validate(item) for item in payload]
        except ValidationError as e:
            raise ValueError(f"投票数据格式错误: {e}") from e
