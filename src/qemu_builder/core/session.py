"""HTTP session handling."""

import aiohttp


async def create_session(timeout: int = 30) -> aiohttp.ClientSession:
    """Create an aiohttp client session.

    Args:
        timeout: Total request timeout in seconds

    Returns:
        New client session; the caller is responsible for closing it
    """
    return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout))
