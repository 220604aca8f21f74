"""Root test configuration - a throwaway website checkout laid out like the real one"""

import os
from pathlib import Path

import pytest


README_MD = """\
# Project

<generated_getting_started_start />
stale guide
<generated_getting_started_end />

## License
"""

GETTING_STARTED_MD = """\
---
id: getting-started
title: Getting Started
layout: docs
permalink: docs/getting-started.html
---
Install it, then read the [API](/jest/docs/api.html).
"""

API_MD = """\
---
id: api
title: API Reference
layout: docs
category: Reference
order: 2
permalink: docs/api.html
---
Call `require('x')` with C:\\path.
"""

EXTERNAL_MD = """\
---
id: elsewhere
title: Elsewhere
layout: docs
permalink: https://example.com/elsewhere
---
"""

TOC_JSON = '{"Introduction": ["getting-started"], "Reference": ["api"]}\n'

BLOG_POSTS = [
    "2015-08-13-blog-post-name-0.5.md",
    "2016-01-01-new-year.md",
    "2016-03-02-spring.md",
    "2016-06-20-summer.md",
    "2016-09-22-autumn.md",
    "2016-12-21-winter.md",
    "2017-02-14-community-10.md",
]


def _post(name: str) -> str:
    return f"---\ntitle: {name[11:-3]}\nauthor: Jane\nauthorURL: http://example.com/jane\n---\nBody of {name}.\n"


@pytest.fixture(name="site")
def site_fixture(tmp_path, monkeypatch) -> Path:
    """Create docs/, blog/, README.md and website/ under tmp_path; cwd is website/."""
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "GettingStarted.md").write_text(GETTING_STARTED_MD)
    (docs / "API.md").write_text(API_MD)
    (docs / "Elsewhere.markdown").write_text(EXTERNAL_MD)
    (docs / "toc.json").write_text(TOC_JSON)
    (docs / "notes.txt").write_text("ignored")

    blog = tmp_path / "blog"
    blog.mkdir()
    for name in BLOG_POSTS:
        (blog / name).write_text(_post(name))

    (tmp_path / "README.md").write_text(README_MD)

    website = tmp_path / "website"
    website.mkdir()
    monkeypatch.chdir(website)
    for name in list(os.environ):
        if name.startswith("MDSITE_"):
            monkeypatch.delenv(name)
    return website
