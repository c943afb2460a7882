import re

import bleach

# 常见的安全块级 / 行内 / 表格标签，外加图片
ALLOWED_TAGS = frozenset(
    {
        "address", "article", "aside", "footer", "header",
        "h1", "h2", "h3", "h4", "h5", "h6", "hgroup", "main", "nav", "section",
        "blockquote", "dd", "div", "dl", "dt", "figcaption", "figure",
        "hr", "li", "ol", "p", "pre", "ul",
        "a", "abbr", "b", "bdi", "bdo", "br", "cite", "code", "data", "dfn",
        "em", "i", "kbd", "mark", "q", "rb", "rp", "rt", "rtc", "ruby",
        "s", "samp", "small", "span", "strong", "sub", "sup", "time", "u", "var", "wbr",
        "caption", "col", "colgroup", "table", "tbody", "td", "tfoot", "th", "thead", "tr",
        "img",
    }
)

ALLOWED_ATTRIBUTES = {
    "a": ["href", "name", "target"],
    "img": ["src", "srcset", "alt", "title", "width", "height", "loading"],
}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "ftp", "mailto", "tel"})

# 这些标签连同其中的文本一起移除
_NON_TEXT_TAGS = re.compile(
    r"<(script|style|textarea|option|noscript)\b[^>]*>.*?</\1\s*>", re.IGNORECASE | re.DOTALL
)


class DescriptionSanitizer:
    """
    提案正文的 HTML 白名单清洗。正文在插入任何页面前都必须经过这里。
    """

    @staticmethod
    def sanitize(body: str | None) -> str:
        """
        清洗正文 HTML。

        - 白名单之外的标签被去掉，保留其中的文本。
        - script / style 等标签连同内容一起删除。
        - 事件处理属性、style 属性以及不在白名单内的链接协议都会被丢弃。
        """
        if not body:
            return ""

        without_scripts = _NON_TEXT_TAGS.sub("", body)
        return bleach.clean(
            without_scripts,
            tags=ALLOWED_TAGS,
            attributes=ALLOWED_ATTRIBUTES,
            protocols=ALLOWED_PROTOCOLS,
            strip=True,
            strip_comments=True,
        )
