"""State carried across fence renders within one document render.

The state lives in the ``env`` mapping of a single render call, so
documents rendered concurrently with their own ``env`` never share it.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any

from beartype import beartype

ENV_KEY = "code_collection"


@beartype
@dataclass
class RenderPassState:
    """Which group was rendered most recently.

    Attributes:
        current_group: The normalized name of the group of the last
            grouped block rendered, or ``""`` before any.
        is_new_group: Whether the last grouped block rendered was the
            first of its group.
        last_index: The token index of the last fence rendered, or -1
            before any. Fence indices only increase within one render
            pass.
    """

    current_group: str = ""
    is_new_group: bool = False
    last_index: int = -1

    def enter_fence(self, index: int) -> None:
        """Record that the fence at token ``index`` is being rendered.

        An index which is not after the last one starts a new render
        pass, so the group state is cleared.
        """
        if index <= self.last_index:
            self.current_group = ""
            self.is_new_group = False
        self.last_index = index

    def enter_group(self, group: str) -> bool:
        """Record that a block of ``group`` is being rendered.

        Returns:
            Whether the block starts a new group.
        """
        self.is_new_group = group != self.current_group
        self.current_group = group
        return self.is_new_group


@beartype
def reset_render_state(env: MutableMapping[str, Any]) -> RenderPassState:
    """
    Put fresh render state into ``env``.
    """
    state = RenderPassState()
    env[ENV_KEY] = state
    return state


@beartype
def get_render_state(env: MutableMapping[str, Any]) -> RenderPassState:
    """Get the render state from ``env``, creating it if missing.

    Tokens from ``MarkdownIt.parse`` may be rendered with a different
    ``env`` than the one they were parsed with.
    """
    state = env.get(ENV_KEY)
    if not isinstance(state, RenderPassState):
        state = reset_render_state(env=env)
    return state
