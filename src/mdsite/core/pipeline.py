"""Convert steps: cleanup, README guide splice, docs batch, blog batch, index writes"""

import json
import logging
from pathlib import Path

from mdsite.config import Settings, load_config
from mdsite.core.emit import build_index_module, build_page_module
from mdsite.core.models import BuildReport, MetadataIndex
from mdsite.core.parse import MD_EXTENSIONS, discover_files, extract_metadata, split_header
from mdsite.core.paths import (
    PER_PAGE,
    blog_path,
    is_external,
    layout_name,
    listing_path,
    module_path,
    page_count,
)
from mdsite.core.readme import absolutize_links, splice_guide
from mdsite.core.utils.fs import remove_file, write_file


logger = logging.getLogger(__name__)

GENERATED_SUBDIRS = ('docs', 'blog')
DOCS_MODULE = 'Metadata'
BLOG_MODULE = 'MetadataBlog'
POST_LAYOUT = 'BlogPostLayout'
LISTING_LAYOUT = 'BlogPageLayout'


def _required(metadata: dict, key: str):
    if key not in metadata:
        raise ValueError(f"missing '{key}' in front-matter")
    return metadata[key]


def run_clean(pages_dir: Path) -> list[Path]:
    """Delete generated files directly under pages_dir/docs and pages_dir/blog (not recursive)."""
    removed = []
    for sub in GENERATED_SUBDIRS:
        for p in sorted((pages_dir / sub).glob('*.*')):
            if p.is_file() and remove_file(p):
                removed.append(p)
    logger.debug("Removed %d stale generated file(s)", len(removed))
    return removed


def run_readme(readme_path: Path, guide_path: Path, link_prefix: str, site_url: str) -> None:
    """Copy the guide body, with absolutized links, between the README guide markers."""
    guide = split_header(guide_path.read_text(encoding='utf-8', errors='replace')).content
    guide = absolutize_links(guide, link_prefix, site_url)
    readme = readme_path.read_text(encoding='utf-8')
    write_file(readme_path, splice_guide(readme, guide))
    logger.debug("Spliced %s into %s", guide_path, readme_path)


def _convert_doc(src: Path, pages_dir: Path, module_ext: str) -> tuple[dict, Path | None]:
    doc = extract_metadata(src.read_text(encoding='utf-8', errors='replace'))
    metadata = doc.metadata
    metadata['source'] = src.name

    permalink = str(_required(metadata, 'permalink'))
    if is_external(permalink):
        logger.debug("Skipping page for external permalink %s (%s)", permalink, src.name)
        return metadata, None

    layout = layout_name(_required(metadata, 'layout'))
    out = pages_dir / module_path(permalink, module_ext).lstrip('/')
    write_file(out, build_page_module(layout, metadata, doc.raw_content))
    logger.debug("Wrote %s (%s)", out, layout)
    return metadata, out


def run_docs(
    docs_dir: Path,
    pages_dir: Path,
    module_ext: str = '.js',
    ) -> tuple[MetadataIndex, list[tuple[str, Path]]]:
    """Convert every Markdown doc to a page module and fold all metadata into one index.

    JSON sidecars are merged into the index under their basename. Returns
    (index, [(source_name, module_path), ...]).
    """
    index = MetadataIndex()
    pages = []
    for p in discover_files(docs_dir):
        try:
            if p.suffix in MD_EXTENSIONS:
                metadata, out = _convert_doc(p, pages_dir, module_ext)
                index.files.append(metadata)
                if out is not None:
                    pages.append((p.name, out))
            elif p.suffix == '.json':
                index.sidecars[p.stem] = json.loads(p.read_text(encoding='utf-8', errors='replace'))
        except Exception as e:
            raise RuntimeError(f"Failed to convert {p}: {e}") from e
    logger.info("Docs: %d record(s), %d page(s), %d sidecar(s)",
                len(index.files), len(pages), len(index.sidecars))
    return index, pages


def _convert_post(src: Path, blog_root: Path, module_ext: str) -> tuple[dict, Path]:
    url_path = blog_path(src.name)
    doc = extract_metadata(src.read_text(encoding='utf-8', errors='replace'))
    metadata = {'path': url_path, 'content': doc.raw_content, **doc.metadata}
    if 'title' in metadata:
        metadata['id'] = metadata['title']
    else:
        metadata.pop('id', None)

    out = write_file(
        blog_root / module_path(url_path, module_ext),
        build_page_module(POST_LAYOUT, metadata, doc.raw_content),
    )
    logger.debug("Wrote %s", out)
    return metadata, out


def run_blog(
    blog_dir: Path,
    pages_dir: Path,
    module_ext: str = '.js',
    ) -> tuple[MetadataIndex, list[tuple[str, Path]]]:
    """Convert posts newest-first, then write one listing module per PER_PAGE posts.

    Returns (index, [(label, module_path), ...]) with posts first, listings last.
    """
    blog_root = pages_dir / 'blog'
    posts = [p for p in discover_files(blog_dir) if p.suffix in MD_EXTENSIONS]
    index = MetadataIndex()
    pages = []
    for p in sorted(posts, key=lambda p: p.as_posix(), reverse=True):
        try:
            metadata, out = _convert_post(p, blog_root, module_ext)
        except Exception as e:
            raise RuntimeError(f"Failed to convert {p}: {e}") from e
        index.files.append(metadata)
        pages.append((p.name, out))

    for page in range(page_count(len(index.files))):
        out = write_file(
            blog_root / listing_path(page) / f"index{module_ext}",
            build_page_module(LISTING_LAYOUT, {'page': page, 'perPage': PER_PAGE}),
        )
        pages.append((f"page {page + 1}", out))
    logger.info("Blog: %d post(s), %d listing page(s)",
                len(index.files), page_count(len(index.files)))
    return index, pages


def write_index(index: MetadataIndex, path: Path, module_name: str) -> Path:
    """Serialize index as a generated module at path."""
    write_file(path, build_index_module(index.to_dict(), module_name))
    logger.debug("Wrote index %s (%s)", path, module_name)
    return path


def execute(settings: Settings = None) -> BuildReport:
    """Run the full conversion: cleanup, README guide, docs batch, blog batch."""
    settings = settings or load_config()
    pages_dir = Path(settings.pages_dir)
    docs_dir = Path(settings.docs_dir)

    removed = run_clean(pages_dir)
    run_readme(
        Path(settings.readme_path), docs_dir / settings.getting_started,
        settings.link_prefix, settings.site_url,
    )

    docs, doc_pages = run_docs(docs_dir, pages_dir, settings.module_ext)
    write_index(docs, Path(settings.metadata_file), DOCS_MODULE)

    blog, blog_pages = run_blog(Path(settings.blog_dir), pages_dir, settings.module_ext)
    write_index(blog, Path(settings.blog_metadata_file), BLOG_MODULE)

    return BuildReport(removed=removed, docs=docs, blog=blog, pages=doc_pages + blog_pages)
