"""
Concurrent page loading

A console page issues its list requests together and keeps each result under
its own name. Requests race; there is no ordering between them.
"""
import asyncio
import logging
from typing import Any, Awaitable, Dict

logger = logging.getLogger(__name__)


async def load_sections(**sections: Awaitable) -> Dict[str, Any]:
    """
    Await every section concurrently

    Args:
        **sections: name -> awaitable (usually a repository call)

    Returns:
        name -> result

    Raises:
        The first error raised by any section (the page load fails as a whole)
    """
    names = list(sections)
    logger.debug(f"Loading page sections: {', '.join(names)}")
    results = await asyncio.gather(*sections.values())
    return dict(zip(names, results))
