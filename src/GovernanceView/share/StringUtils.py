class StringUtils:
    """
    提供字符串处理相关的静态工具方法
    """

    @staticmethod
    def shorten_address(address: str | None) -> str:
        """
        缩短链上地址以便展示。<br>
        例如：'0x1234567890abcdef1234567890abcdef12345678' -> '0x1234...5678'
        """
        if not address:
            return ""
        if len(address) <= 10:
            return address
        return f"{address[:6]}...{address[-4:]}"
