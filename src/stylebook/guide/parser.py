import logging
import re
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

HEADING_PREFIX = "## "
COLOR_RE = re.compile(r"#[0-9A-Fa-f]{6}(?![0-9A-Fa-f])")
NON_WORD_RE = re.compile(r"[^\w]+")
LIST_MARKER_RE = re.compile(r"^\s*(?:[-+]|\d+[.)])\s+")


@dataclass(frozen=True)
class ColorEntry:
    color: str
    name: str


@dataclass(frozen=True)
class Section:
    title: str
    id: str
    content: str
    is_open: bool = True


@dataclass
class ParsedGuide:
    sections: list[Section] = field(default_factory=list)
    colors: dict[str, list[ColorEntry]] = field(default_factory=dict)
    color_section_id: str | None = None


@dataclass
class _SectionDraft:
    title: str
    id: str
    lines: list[str]

    def build(self) -> Section:
        return Section(title=self.title, id=self.id, content="\n".join(self.lines))


def slugify(title: str) -> str:
    return NON_WORD_RE.sub("-", title.lower())


def is_color_heading(title: str) -> bool:
    lowered = title.lower()
    return "color" in lowered or "palette" in lowered or "1." in title


def color_name(prefix: str, fallback: str) -> str:
    """Name a color from the text preceding its hex code.

    Only text before a ``:`` counts as a name. Emphasis markers, list
    bullets and separators left over from a previous color are dropped.
    """
    colon = prefix.find(":")
    if colon == -1:
        return fallback
    name = prefix[:colon].replace("*", "").replace("_", "")
    name = LIST_MARKER_RE.sub("", name.lstrip(" ,;|/\t"))
    return name.strip() or fallback


class SectionParser:
    def __init__(self, multi_color_per_line: bool = False):
        self.multi_color_per_line = multi_color_per_line

    def _unique_id(self, title: str, used: set[str]) -> str:
        base = slugify(title)
        section_id = base
        suffix = 2
        while section_id in used:
            section_id = f"{base}-{suffix}"
            suffix += 1
        used.add(section_id)
        return section_id

    def _match_colors(self, line: str) -> list[re.Match]:
        if self.multi_color_per_line:
            return list(COLOR_RE.finditer(line))
        match = COLOR_RE.search(line)
        return [match] if match else []

    def _collect_colors(self, line: str, entries: list[ColorEntry]) -> None:
        start = 0
        for match in self._match_colors(line):
            name = color_name(line[start:match.start()], f"Color {len(entries) + 1}")
            entries.append(ColorEntry(color=match.group(0), name=name))
            start = match.end()

    def parse(self, markdown: str) -> ParsedGuide:
        if not markdown:
            return ParsedGuide()

        sections: list[Section] = []
        colors: dict[str, list[ColorEntry]] = {}
        color_section_id: str | None = None
        used_ids: set[str] = set()
        current: _SectionDraft | None = None

        for line in markdown.split("\n"):
            if line.startswith(HEADING_PREFIX):
                if current is not None:
                    sections.append(current.build())

                title = line[len(HEADING_PREFIX):]
                current = _SectionDraft(
                    title=title,
                    id=self._unique_id(title, used_ids),
                    lines=[line],
                )
                if is_color_heading(title):
                    if color_section_id is None:
                        color_section_id = current.id
                    colors[current.id] = []
                continue

            # Text before the first heading belongs to no section
            if current is None:
                continue

            if current.id in colors:
                self._collect_colors(line, colors[current.id])
            current.lines.append(line)

        if current is not None:
            sections.append(current.build())

        logger.debug(
            f"Parsed {len(sections)} sections, color section: {color_section_id}"
        )
        return ParsedGuide(
            sections=sections,
            colors=colors,
            color_section_id=color_section_id,
        )


def parse(markdown: str, multi_color_per_line: bool = False) -> ParsedGuide:
    return SectionParser(multi_color_per_line=multi_color_per_line).parse(markdown)
