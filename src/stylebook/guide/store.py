import logging
from dataclasses import replace
from typing import Callable

from stylebook.guide.ordering import promote_section
from stylebook.guide.parser import ColorEntry, Section, SectionParser

logger = logging.getLogger(__name__)

ScrollCallback = Callable[[str], None]


class SectionStore:
    """Open/closed and active-section state for one parsed style guide.

    Every ``load`` rebuilds the sections from scratch: all sections start
    open and no section is active.
    """

    def __init__(
        self,
        parser: SectionParser | None = None,
        on_scroll: ScrollCallback | None = None,
    ):
        self.parser = parser or SectionParser()
        self.on_scroll = on_scroll
        self.markdown = ""
        self.sections: list[Section] = []
        self.colors: dict[str, list[ColorEntry]] = {}
        self.color_section_id: str | None = None
        self.active_section_id: str | None = None

    def load(self, markdown: str) -> None:
        parsed = self.parser.parse(markdown)
        self.markdown = markdown or ""
        self.sections = promote_section(parsed.sections, parsed.color_section_id)
        self.colors = parsed.colors
        self.color_section_id = parsed.color_section_id
        self.active_section_id = None
        logger.debug(f"Loaded {len(self.sections)} sections")

    def get(self, section_id: str) -> Section | None:
        index = self._index(section_id)
        return None if index is None else self.sections[index]

    def colors_for(self, section_id: str) -> list[ColorEntry] | None:
        """Colors of a section, or None if it is not a color section."""
        return self.colors.get(section_id)

    def toggle(self, section_id: str) -> None:
        index = self._index(section_id)
        if index is None:
            logger.debug(f"Ignoring toggle of unknown section: {section_id}")
            return

        is_open = not self.sections[index].is_open
        self._set_open(index, is_open)
        if is_open:
            self.active_section_id = section_id
            self._scroll_to(section_id)

    def navigate_to(self, section_id: str) -> None:
        index = self._index(section_id)
        if index is None:
            logger.debug(f"Ignoring navigation to unknown section: {section_id}")
            return

        if not self.sections[index].is_open:
            self._set_open(index, True)
        self.active_section_id = section_id
        self._scroll_to(section_id)

    def _index(self, section_id: str) -> int | None:
        for index, section in enumerate(self.sections):
            if section.id == section_id:
                return index
        return None

    def _set_open(self, index: int, is_open: bool) -> None:
        sections = list(self.sections)
        sections[index] = replace(sections[index], is_open=is_open)
        self.sections = sections

    def _scroll_to(self, section_id: str) -> None:
        if self.on_scroll is None:
            return
        try:
            self.on_scroll(section_id)
        except Exception as e:
            # Best effort, the state change stands
            logger.warning(f"Scroll to section {section_id} failed: {e}")
