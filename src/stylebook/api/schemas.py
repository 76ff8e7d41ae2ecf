from datetime import datetime

from pydantic import BaseModel


class GuideCreate(BaseModel):
    markdown: str


class ColorEntryResponse(BaseModel):
    color: str
    name: str
    is_dark: bool


class SectionResponse(BaseModel):
    id: str
    title: str
    content: str
    is_open: bool = True
    is_active: bool = False
    colors: list[ColorEntryResponse] | None = None


class GuideResponse(BaseModel):
    id: str
    created_at: datetime
    sections: list[SectionResponse] = []
    active_section_id: str | None = None
    color_section_id: str | None = None
    scroll_to: str | None = None


class SectionHtmlResponse(BaseModel):
    id: str
    title: str
    html: str
