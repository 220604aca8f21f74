"""Generated page module and metadata index module rendering"""

import json
from typing import Any


GENERATED_HEADER = ['/**', ' * @generated', ' */']


def backtickify(text: str) -> str:
    """Quote text as a JS template literal that evaluates back to text."""
    escaped = text.replace('\\', '\\\\').replace('`', '\\`').replace('${', '\\${')
    # require\( keeps the bundler from resolving example require calls in docs
    return f"`{escaped}`".replace('require(', 'require\\(')


def _compact_json(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, separators=(',', ':'))


def build_page_module(layout: str, metadata: dict[str, Any], raw_content: str = None) -> str:
    """Render a page module that mounts layout with metadata and, if any, the raw content.

    Content lines are left out entirely when raw_content is empty or None.
    """
    lines = [
        *GENERATED_HEADER,
        'var React = require("React");',
        f'var Layout = require("{layout}");',
        raw_content and f"var content = {backtickify(raw_content)};",
        'var Post = React.createClass({',
        raw_content and '  statics: { content: content },',
        '  render: function() {',
        '    return (',
        f"      <Layout metadata={{{_compact_json(metadata)}}}>",
        raw_content and '        {content}',
        '      </Layout>',
        '    );',
        '  }',
        '});',
        'module.exports = Post;',
    ]
    return '\n'.join(line for line in lines if line)


def build_index_module(index: dict[str, Any], module_name: str) -> str:
    """Render a metadata index as a generated module exporting its JSON."""
    return (
        '/**\n'
        ' * @generated\n'
        f" * @providesModule {module_name}\n"
        ' */\n'
        f"module.exports = {json.dumps(index, indent=2, ensure_ascii=False)};"
    )
