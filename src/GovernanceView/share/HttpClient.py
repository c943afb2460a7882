from typing import Any, Optional

import aiohttp


class HttpClient:
    _session: Optional[aiohttp.ClientSession] = None
    _timeout: float = 10

    @classmethod
    def configure(cls, timeout: float) -> None:
        cls._timeout = timeout

    @classmethod
    def _get_session(cls) -> aiohttp.ClientSession:
        if cls._session is None or cls._session.closed:
            cls._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=cls._timeout)
            )
        return cls._session

    @classmethod
    async def get_json(cls, url: str, **kwargs: Any) -> Any:
        session = cls._get_session()
        async with session.get(url, **kwargs) as response:
            response.raise_for_status()
            return await response.json()

    @classmethod
    async def close(cls) -> None:
        if cls._session and not cls._session.closed:
            await cls._session.close()
