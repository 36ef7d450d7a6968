"""The markdown-it plugin for grouped, tabbed code blocks."""

from beartype import beartype
from markdown_it import MarkdownIt
from markdown_it.renderer import RendererHTML
from myst_parser.config.main import MdParserConfig
from myst_parser.parsers.mdit import create_md_parser as create_myst_parser

from mdit_code_collection.options import DEFAULT_OPTIONS, CodeCollectionOptions
from mdit_code_collection.renderer import GroupedFenceRenderer
from mdit_code_collection.rewriter import TOKEN_TYPE, GroupMarkerRewriter

FLAVORS = ("commonmark", "myst")


@beartype
def code_collection_plugin(
    md: MarkdownIt,
    options: CodeCollectionOptions | None = None,
) -> None:
    """Add grouped code blocks to ``md``.

    Use with ``md.use(code_collection_plugin)``, optionally passing
    ``options=CodeCollectionOptions(...)``.

    Raises:
        TypeError: The parser does not render HTML.
    """
    if not isinstance(md.renderer, RendererHTML):
        msg = (
            "The code collection plugin needs an HTML renderer, got "
            f"{type(md.renderer).__name__}"
        )
        raise TypeError(msg)

    options = options or DEFAULT_OPTIONS
    md.core.ruler.push(TOKEN_TYPE, GroupMarkerRewriter(options=options))
    GroupedFenceRenderer(renderer=md.renderer, options=options).install()


@beartype
def create_md_parser(
    *,
    options: CodeCollectionOptions | None = None,
    flavor: str = "commonmark",
) -> MarkdownIt:
    """Create a parser with the plugin installed.

    Args:
        options: The plugin options.
        flavor: ``"commonmark"`` for plain markdown-it, or ``"myst"`` for
            a parser with the MyST syntax extensions.

    Raises:
        ValueError: The flavor is not known.
    """
    if flavor == "commonmark":
        md = MarkdownIt("commonmark")
    elif flavor == "myst":
        md = create_myst_parser(config=MdParserConfig(), renderer=RendererHTML)
    else:
        msg = f"Unknown flavor {flavor!r}, expected one of {FLAVORS}"
        raise ValueError(msg)

    return md.use(code_collection_plugin, options=options)


@beartype
def render_markdown(
    text: str,
    *,
    options: CodeCollectionOptions | None = None,
    flavor: str = "commonmark",
) -> str:
    """
    Render ``text`` to HTML with grouped code blocks.
    """
    md = create_md_parser(options=options, flavor=flavor)
    return md.render(text)
