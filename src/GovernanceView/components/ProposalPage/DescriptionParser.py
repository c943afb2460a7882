from typing import Optional

from .DescriptionSanitizer import DescriptionSanitizer
from .dto.ParsedDescriptionDto import ParsedDescriptionDto
from .dto.RichTextPayloadDto import RichTextPayloadDto


class DescriptionParser:
    """
    拆分提案描述文本。

    链上提案描述的约定格式为 "标题&&正文"，正文通常是 HTML。
    """

    DELIMITER = "&&"

    @staticmethod
    def parse(description: Optional[str]) -> ParsedDescriptionDto:
        """
        按第一个分隔符将描述拆成标题和正文。

        找不到分隔符时整段文本都视为正文，标题为空字符串。
        本方法只负责拆分，不做任何清洗。
        """
        if not description:
            return ParsedDescriptionDto()

        title, delimiter, body = description.partition(DescriptionParser.DELIMITER)
        if not delimiter:
            return ParsedDescriptionDto(title="", body=description)

        return ParsedDescriptionDto(title=title.strip(), body=body)

    @staticmethod
    def to_rich_text(description: Optional[str]) -> RichTextPayloadDto:
        """
        生成交给富文本渲染器的数据，正文在这里经过白名单清洗。
        """
        parsed = DescriptionParser.parse(description)
        return RichTextPayloadDto(
            title=parsed.title,
            body_html=DescriptionSanitizer.sanitize(parsed.body),
        )
