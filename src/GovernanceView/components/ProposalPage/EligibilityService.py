import math
from decimal import Decimal
from numbers import Real
from typing import Optional

from GovernanceView.share.enums.ProposalState import ProposalState


class EligibilityService:
    """
    提供“提交投票”按钮是否可用的判断。
    """

    REQUIRED_BALANCE = 1

    @staticmethod
    def can_vote(state: Optional[int], balance: Optional[Real | Decimal]) -> bool:
        """
        判断当前用户能否对提案投票。

        Args:
            state: 提案的原始状态码。
            balance: 用户持有的代币数量；未取到时为 None。

        Returns:
            只有提案处于投票中且余额为不小于 1 的有限数值时返回 True。
            余额缺失或无法识别时一律返回 False。
        """
        if ProposalState.from_raw(state) is not ProposalState.ACTIVE:
            return False

        if balance is None or isinstance(balance, bool) or not isinstance(balance, (Real, Decimal)):
            return False

        if not isinstance(balance, int) and not math.isfinite(balance):
            return False

        return balance >= EligibilityService.REQUIRED_BALANCE
