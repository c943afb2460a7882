from typing import Dict, Optional


class StaticNameResolver:
    """
    使用配置文件中的地址别名表进行名称解析。地址比较不区分大小写。
    """

    def __init__(self, aliases: Optional[Dict[str, str]] = None):
        self.aliases = {address.lower(): name for address, name in (aliases or {}).items()}

    async def resolve(self, address: str) -> Optional[str]:
        if not address:
            return None
        return self.aliases.get(address.lower())
