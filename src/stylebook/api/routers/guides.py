import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import HTMLResponse

from stylebook.api.dependencies import get_parser, get_registry, get_settings, verify_api_key
from stylebook.api.schemas import (
    ColorEntryResponse,
    GuideCreate,
    GuideResponse,
    SectionHtmlResponse,
    SectionResponse,
)
from stylebook.api.sessions import GuideRegistry, GuideSession
from stylebook.guide.colors import is_dark
from stylebook.guide.export import MARKDOWN_MEDIA_TYPE, build_download
from stylebook.guide.parser import SectionParser
from stylebook.render.content import render_content
from stylebook.render.page import render_page
from stylebook.render.swatches import render_swatches
from stylebook.shared.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/guides",
    tags=["guides"],
    dependencies=[Depends(verify_api_key)],
)


def get_session(
    guide_id: str,
    registry: Annotated[GuideRegistry, Depends(get_registry)],
) -> GuideSession:
    session = registry.get(guide_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Guide not found")
    return session


def guide_response(session: GuideSession) -> GuideResponse:
    store = session.store
    sections = []
    for section in store.sections:
        colors = store.colors_for(section.id)
        sections.append(
            SectionResponse(
                id=section.id,
                title=section.title,
                content=section.content,
                is_open=section.is_open,
                is_active=section.id == store.active_section_id,
                colors=None if colors is None else [
                    ColorEntryResponse(
                        color=entry.color,
                        name=entry.name,
                        is_dark=is_dark(entry.color),
                    )
                    for entry in colors
                ],
            )
        )

    return GuideResponse(
        id=session.id,
        created_at=session.created_at,
        sections=sections,
        active_section_id=store.active_section_id,
        color_section_id=store.color_section_id,
        scroll_to=session.take_scroll(),
    )


@router.post("", response_model=GuideResponse, status_code=status.HTTP_201_CREATED)
async def create_guide(
    body: GuideCreate,
    registry: Annotated[GuideRegistry, Depends(get_registry)],
    parser: Annotated[SectionParser, Depends(get_parser)],
):
    session = registry.create(body.markdown, parser)
    logger.info(f"Created guide {session.id} with {len(session.store.sections)} sections")
    return guide_response(session)


@router.get("/{guide_id}", response_model=GuideResponse)
async def get_guide(session: Annotated[GuideSession, Depends(get_session)]):
    return guide_response(session)


@router.put("/{guide_id}", response_model=GuideResponse)
async def reload_guide(
    body: GuideCreate,
    session: Annotated[GuideSession, Depends(get_session)],
):
    session.load(body.markdown)
    return guide_response(session)


@router.delete("/{guide_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_guide(
    guide_id: str,
    registry: Annotated[GuideRegistry, Depends(get_registry)],
):
    if not registry.remove(guide_id):
        raise HTTPException(status_code=404, detail="Guide not found")


@router.post("/{guide_id}/sections/{section_id}/toggle", response_model=GuideResponse)
async def toggle_section(
    section_id: str,
    session: Annotated[GuideSession, Depends(get_session)],
):
    session.store.toggle(section_id)
    return guide_response(session)


@router.post("/{guide_id}/sections/{section_id}/navigate", response_model=GuideResponse)
async def navigate_to_section(
    section_id: str,
    session: Annotated[GuideSession, Depends(get_session)],
):
    session.store.navigate_to(section_id)
    return guide_response(session)


@router.get("/{guide_id}/sections/{section_id}/html", response_model=SectionHtmlResponse)
async def get_section_html(
    section_id: str,
    session: Annotated[GuideSession, Depends(get_session)],
):
    section = session.store.get(section_id)
    if section is None:
        raise HTTPException(status_code=404, detail="Section not found")

    colors = session.store.colors_for(section_id) or []
    return SectionHtmlResponse(
        id=section.id,
        title=section.title,
        html=render_swatches(colors) + render_content(section.content),
    )


@router.get("/{guide_id}/markdown")
async def get_markdown(session: Annotated[GuideSession, Depends(get_session)]):
    return Response(content=session.store.markdown, media_type=MARKDOWN_MEDIA_TYPE)


@router.get("/{guide_id}/download", name="download_guide")
async def download_guide(
    session: Annotated[GuideSession, Depends(get_session)],
    settings: Annotated[Settings, Depends(get_settings)],
    filename: str | None = None,
):
    download = build_download(
        session.store.markdown,
        filename or settings.download_filename,
    )
    return Response(
        content=download.content,
        media_type=download.media_type,
        headers={"Content-Disposition": download.content_disposition},
    )


@router.get("/{guide_id}/view", response_class=HTMLResponse)
async def view_guide(
    request: Request,
    session: Annotated[GuideSession, Depends(get_session)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    download_url = str(request.url_for("download_guide", guide_id=session.id))
    if request.url.query:
        download_url = f"{download_url}?{request.url.query}"

    return render_page(
        session.store,
        download_url=download_url,
        feedback_ms=int(settings.feedback_seconds * 1000),
        scroll_delay_ms=settings.scroll_delay_ms,
        scroll_to=session.take_scroll(),
    )
