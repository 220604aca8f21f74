"""Splice the getting started guide into the README between generated markers"""


GUIDE_START = '<generated_getting_started_start />'
GUIDE_END = '<generated_getting_started_end />'


def absolutize_links(text: str, link_prefix: str, site_url: str) -> str:
    """Rewrite Markdown link targets '(<link_prefix>...' to '(<site_url>...'."""
    return text.replace(f"({link_prefix}", f"({site_url}")


def splice_guide(readme: str, guide: str) -> str:
    """Replace whatever sits between the guide markers with guide; markers are kept."""
    for marker in (GUIDE_START, GUIDE_END):
        if marker not in readme:
            raise ValueError(f"README is missing marker {marker}")
    start = readme.index(GUIDE_START) + len(GUIDE_START)
    end = readme.index(GUIDE_END)
    if end < start:
        raise ValueError(f"README marker {GUIDE_END} precedes {GUIDE_START}")
    return readme[:start] + guide + readme[end:]
