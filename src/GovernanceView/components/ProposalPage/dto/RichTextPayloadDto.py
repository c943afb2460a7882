from GovernanceView.share.BaseDto import BaseDto


class RichTextPayloadDto(BaseDto):
    """
    交给富文本渲染器的数据。body_html 已经过白名单清洗。
    """

    title: str
    body_html: str
