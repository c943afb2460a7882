from GovernanceView.share.BaseDto import BaseDto


class ParsedDescriptionDto(BaseDto):
    """
    从提案描述中拆分出的标题与正文（正文尚未清洗）
    """

    title: str = ""
    body: str = ""
