from stylebook.guide.parser import Section


def promote_section(sections: list[Section], section_id: str | None) -> list[Section]:
    """Move the section with ``section_id`` to the front.

    The remaining sections keep their relative order. An unknown or missing
    id leaves the order untouched.
    """
    if section_id is None:
        return list(sections)

    for index, section in enumerate(sections):
        if section.id == section_id:
            return [section] + sections[:index] + sections[index + 1:]

    return list(sections)
