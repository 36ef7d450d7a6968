"""A core rule which replaces grouping marker paragraphs with structural
tokens.
"""

import logging
from collections.abc import Sequence

from beartype import beartype
from markdown_it.rules_core import StateCore
from markdown_it.token import Token

from mdit_code_collection.fragments import render_tab_list
from mdit_code_collection.markers import is_close_marker, parse_open_marker
from mdit_code_collection.options import DEFAULT_OPTIONS, CodeCollectionOptions
from mdit_code_collection.render_state import reset_render_state

logger = logging.getLogger(__name__)

TOKEN_TYPE = "code_collection"

GROUP_START = "group-start"
GROUP_TABS = "group-tabs"
GROUP_END = "group-end"

START_COMMENT = "<!-- Start Group -->"
END_COMMENT = "<!-- End Group -->"


@beartype
def structural_kind(token: Token) -> str | None:
    """
    The sub-kind of a structural token, or ``None`` for other tokens.
    """
    if token.type != TOKEN_TYPE:
        return None
    kind = token.meta.get("kind")
    return kind if isinstance(kind, str) else None


@beartype
def _structural_token(*, kind: str, info: str, content: str) -> Token:
    """
    Create a token carrying rendering instructions for a group.
    """
    token = Token(type=TOKEN_TYPE, tag="", nesting=0)
    token.info = info
    token.content = content
    token.block = True
    token.meta["kind"] = kind
    return token


@beartype
class GroupMarkerRewriter:
    """A markdown-it core rule for group markers.

    Each inline token holding an open-group marker is replaced by a
    ``group-start`` token followed by a ``group-tabs`` token whose
    content is the rendered tab list. Each inline token which is a
    close-group marker is replaced by a ``group-end`` token. All other
    tokens are kept, in order.
    """

    def __init__(
        self,
        *,
        options: CodeCollectionOptions = DEFAULT_OPTIONS,
    ) -> None:
        """
        Args:
            options: The plugin options.
        """
        self._options = options

    def _open_group_tokens(self, token: Token) -> list[Token] | None:
        """
        Replacement tokens for an open-group marker, if ``token`` is one.
        """
        marker = parse_open_marker(content=token.content)
        if marker is None:
            return None

        logger.debug(
            "Opening group %r with tabs %r",
            marker.group,
            marker.tabs,
        )
        start = _structural_token(
            kind=GROUP_START,
            info=f'group="{marker.group}"',
            content=START_COMMENT,
        )
        start.meta["group"] = marker.group
        start.map = token.map

        tabs = _structural_token(
            kind=GROUP_TABS,
            info="group-tabs",
            content=render_tab_list(
                group=marker.group,
                tabs=marker.tabs,
                options=self._options,
            ),
        )
        tabs.meta["tabs"] = list(marker.tabs)
        tabs.map = token.map
        return [start, tabs]

    def rewrite_tokens(self, tokens: Sequence[Token]) -> list[Token]:
        """Rewrite a document's tokens in one forward pass.

        Args:
            tokens: The tokens of the whole document.

        Returns:
            A new list of tokens. Inserted tokens are never rescanned.
        """
        rewritten: list[Token] = []
        for token in tokens:
            if token.type != "inline":
                rewritten.append(token)
                continue

            replacement = self._open_group_tokens(token=token)
            if replacement is not None:
                rewritten.extend(replacement)
            elif is_close_marker(content=token.content):
                logger.debug("Closing group")
                end = _structural_token(
                    kind=GROUP_END,
                    info="end-group",
                    content=END_COMMENT,
                )
                end.map = token.map
                rewritten.append(end)
            else:
                rewritten.append(token)
        return rewritten

    def __call__(self, state: StateCore) -> None:
        """
        Rewrite the tokens of the document being parsed.
        """
        state.tokens = self.rewrite_tokens(tokens=state.tokens)
        reset_render_state(env=state.env)
