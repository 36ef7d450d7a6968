"""
Shared pytest fixtures for tests package.
"""

import pytest
from markdown_it import MarkdownIt

from mdit_code_collection import create_md_parser


@pytest.fixture(name="md")
def fixture_md() -> MarkdownIt:
    """
    Provide a CommonMark parser with the code collection plugin.
    """
    return create_md_parser()


@pytest.fixture(name="demo_document")
def fixture_demo_document() -> str:
    """
    Provide a document with one group holding one code block.
    """
    return (
        '{{ group="demo" tabs=["JS","Go"] }}\n'
        "\n"
        '```js group="demo" tab="JS"\n'
        "console.log(1);\n"
        "```\n"
        "\n"
        "{{ /group }}\n"
    )
