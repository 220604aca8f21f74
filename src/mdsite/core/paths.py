"""Layout names, page-module paths, and blog URL derivation"""

import re


EXTERNAL_RE = re.compile(r'^https?:')
LAYOUT_SUFFIX = 'Layout'
PER_PAGE = 5


def is_external(permalink) -> bool:
    """True for absolute http(s) permalinks, which are indexed but never rendered."""
    return bool(EXTERNAL_RE.match(str(permalink)))


def layout_name(layout: str) -> str:
    """Layout module for a front-matter layout value ('docs' -> 'DocsLayout')."""
    return layout[0].upper() + layout[1:] + LAYOUT_SUFFIX


def module_path(url_path: str, ext: str = '.js') -> str:
    """Swap a trailing '.html' for the page-module extension."""
    if url_path.endswith('.html'):
        return url_path[:-len('.html')] + ext
    return url_path


def blog_path(filename: str) -> str:
    """Map a dated post filename to its URL path.

    2015-08-13-blog-post-name-0.5.md -> 2015/08/13/blog-post-name-0-5.html

    Only the first three dashes become slashes, so this is not a date parser.
    Dots become dashes because the page server mishandles names like
    react-0.14.js, then the '-md' tail becomes '.html'.
    """
    path = filename.replace('-', '/', 3).replace('.', '-')
    if path.endswith('-md'):
        return path[:-len('-md')] + '.html'
    return path


def page_count(total: int, per_page: int = PER_PAGE) -> int:
    return -(-total // per_page)


def listing_path(page: int) -> str:
    """Listing directory relative to the blog root: '' for page 0, then 'page2', 'page3', ..."""
    return f"page{page + 1}" if page > 0 else ''
