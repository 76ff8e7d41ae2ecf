from stylebook.guide.ordering import promote_section
from stylebook.guide.parser import Section, parse


def _sections(*ids):
    return [Section(title=i, id=i, content=f"## {i}") for i in ids]


def test_promotes_section_to_front():
    sections = _sections("intro", "typography", "colors", "spacing")

    result = promote_section(sections, "colors")

    assert [s.id for s in result] == ["colors", "intro", "typography", "spacing"]


def test_no_color_section_keeps_order():
    sections = _sections("intro", "typography")

    assert promote_section(sections, None) == sections


def test_unknown_id_keeps_order():
    sections = _sections("intro", "typography")

    assert promote_section(sections, "missing") == sections


def test_input_is_not_modified():
    sections = _sections("a", "b", "c")

    promote_section(sections, "c")

    assert [s.id for s in sections] == ["a", "b", "c"]


def test_color_section_first_after_parse():
    parsed = parse(
        "## Overview\nCalm.\n## Layout\nGrid.\n## Brand Palette\n- Ink: #101010\n## Motion\nSlow."
    )

    result = promote_section(parsed.sections, parsed.color_section_id)

    assert [s.title for s in result] == ["Brand Palette", "Overview", "Layout", "Motion"]
