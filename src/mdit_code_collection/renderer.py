"""Render rules for structural group tokens and grouped fences.

Both rules wrap the rules they replace: when a token is not one they
handle, the previous rule renders it.
"""

from collections.abc import Callable, MutableMapping, Sequence
from typing import Any

from beartype import beartype
from markdown_it.renderer import RendererHTML
from markdown_it.token import Token
from markdown_it.utils import OptionsDict

from mdit_code_collection.exceptions import GroupStructureError
from mdit_code_collection.fragments import (
    code_block_id,
    render_grouped_block,
    render_standalone_block,
    render_tab_nav,
)
from mdit_code_collection.markers import parse_fence_group
from mdit_code_collection.options import DEFAULT_OPTIONS, CodeCollectionOptions
from mdit_code_collection.render_state import get_render_state
from mdit_code_collection.rewriter import (
    GROUP_END,
    GROUP_START,
    GROUP_TABS,
    TOKEN_TYPE,
    structural_kind,
)

RenderRule = Callable[
    [Sequence[Token], int, OptionsDict, MutableMapping[str, Any]],
    str,
]


@beartype
class GroupedFenceRenderer:
    """Render rules for the tokens produced by ``GroupMarkerRewriter``
    and for fenced code blocks.

    The rules previously registered for ``fence`` and
    ``code_collection`` are captured on construction and used as the
    fallbacks.
    """

    def __init__(
        self,
        *,
        renderer: RendererHTML,
        options: CodeCollectionOptions = DEFAULT_OPTIONS,
    ) -> None:
        """
        Args:
            renderer: The renderer to install the rules on.
            options: The plugin options.
        """
        self._renderer = renderer
        self._options = options
        self._default_fence: RenderRule = renderer.rules.get(
            "fence",
            renderer.fence,
        )
        self._default_code_collection: RenderRule = renderer.rules.get(
            TOKEN_TYPE,
            renderer.renderToken,
        )

    def install(self) -> None:
        """
        Register the rules on the renderer.
        """
        self._renderer.rules[TOKEN_TYPE] = self.render_code_collection
        self._renderer.rules["fence"] = self.render_fence

    def render_code_collection(
        self,
        tokens: Sequence[Token],
        idx: int,
        options: OptionsDict,
        env: MutableMapping[str, Any],
    ) -> str:
        """Render a structural group token.

        A ``group-start`` token renders the tab navigation using the
        content of the ``group-tabs`` token after it, which then renders
        nothing itself.

        Raises:
            GroupStructureError: A ``group-start`` token is not followed by
                a ``group-tabs`` token, or a ``group-tabs`` token is not
                preceded by a ``group-start`` token.
        """
        token = tokens[idx]
        kind = structural_kind(token=token)

        if kind == GROUP_START:
            if idx + 1 >= len(tokens) or (
                structural_kind(token=tokens[idx + 1]) != GROUP_TABS
            ):
                msg = f"{token.info} is not followed by its tab list"
                raise GroupStructureError(msg)
            return render_tab_nav(
                group=token.meta["group"],
                tab_list=tokens[idx + 1].content,
            )

        if kind == GROUP_TABS:
            if idx == 0 or structural_kind(token=tokens[idx - 1]) != GROUP_START:
                msg = "Tab list is not preceded by a group start"
                raise GroupStructureError(msg)
            return ""

        if kind == GROUP_END:
            return f"{token.content}\n"

        return self._default_code_collection(tokens, idx, options, env)

    def render_fence(
        self,
        tokens: Sequence[Token],
        idx: int,
        options: OptionsDict,
        env: MutableMapping[str, Any],
    ) -> str:
        """Render a fenced code block inside a wrapper with a copy button.

        Blocks with both ``group`` and ``tab`` attributes get the group
        classes. The first block of each run of a group gets the active
        code class. Other blocks get a standalone wrapper and leave the
        current group alone. A fence index which is not after the previous
        one starts a new render pass.
        """
        fence_html = self._default_fence(tokens, idx, options, env)
        block_id = code_block_id(index=idx)
        state = get_render_state(env=env)
        state.enter_fence(index=idx)

        fence_group = parse_fence_group(info=tokens[idx].info)
        if fence_group is None:
            return render_standalone_block(
                block_id=block_id,
                fence_html=fence_html,
                options=self._options,
            )

        is_new_group = state.enter_group(group=fence_group.group)
        return render_grouped_block(
            fence_group=fence_group,
            is_new_group=is_new_group,
            block_id=block_id,
            fence_html=fence_html,
            options=self._options,
        )
