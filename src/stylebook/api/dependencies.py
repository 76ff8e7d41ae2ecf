from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header, HTTPException, Query, status

from stylebook.api.sessions import GuideRegistry
from stylebook.guide.parser import SectionParser
from stylebook.shared.config import Settings


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_registry() -> GuideRegistry:
    return GuideRegistry(max_guides=get_settings().max_guides)


async def verify_api_key(
    settings: Annotated[Settings, Depends(get_settings)],
    x_api_key: Annotated[str | None, Header()] = None,
    api_key: Annotated[str | None, Query()] = None,
) -> str:
    # The query parameter lets a browser open the rendered page directly
    key = x_api_key or api_key
    if key != settings.api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid API key",
        )
    return key


def get_parser(
    settings: Annotated[Settings, Depends(get_settings)],
) -> SectionParser:
    return SectionParser(multi_color_per_line=settings.multi_color_per_line)
