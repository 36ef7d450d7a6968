"""
HTML fragments for tab lists and code block wrappers.
"""

from collections.abc import Sequence

from beartype import beartype
from markdown_it.common.utils import escapeHtml

from mdit_code_collection.markers import FenceGroup
from mdit_code_collection.options import CodeCollectionOptions


@beartype
def code_block_id(index: int) -> str:
    """
    The identifier shared by a code block wrapper and its copy button.
    """
    return f"code-{index}"


@beartype
def render_tab_list(
    *,
    group: str,
    tabs: Sequence[str],
    options: CodeCollectionOptions,
) -> str:
    """Render the list items of a group's tab navigation.

    The first tab is the active one. The other items keep the space
    separating the class names, so they read ``class="code-tab "``.

    Args:
        group: The group name.
        tabs: The tab labels, in display order.
        options: The plugin options.

    Returns:
        The concatenated ``<li>`` elements.
    """
    escaped_group = escapeHtml(raw=group)
    items: list[str] = []
    for index, tab in enumerate(iterable=tabs):
        active = options.active_tab_class if index == 0 else ""
        items.append(
            f'<li class="code-tab {active}" data-group="{escaped_group}" '
            f'data-code-index="{index}">{escapeHtml(raw=tab)}</li>'
        )
    return "".join(items)


@beartype
def render_tab_nav(*, group: str, tab_list: str) -> str:
    """Render the group start comment and the tab navigation container.

    The group name is escaped so that it cannot end the comment.
    """
    return (
        f'<!-- Start group="{escapeHtml(raw=group)}" -->\n'
        f'<nav class="tab"><ul>{tab_list}</ul></nav>\n'
    )


@beartype
def render_copy_button(*, block_id: str, options: CodeCollectionOptions) -> str:
    """Render the element which copies the code block ``block_id``.

    Returns:
        The element followed by a newline, or an empty string if copy
        buttons are disabled.
    """
    if not options.copy_button:
        return ""

    tag = options.copy_button_tag
    classes = " ".join(
        part
        for part in (
            options.copy_button_icon_classes,
            options.copy_button_container_class,
        )
        if part
    )
    return (
        f'<{tag} class="{classes}" '
        f"onclick=\"{options.copy_function}('{block_id}')\"></{tag}>\n"
    )


@beartype
def render_grouped_block(
    *,
    fence_group: FenceGroup,
    is_new_group: bool,
    block_id: str,
    fence_html: str,
    options: CodeCollectionOptions,
) -> str:
    """Wrap rendered fence HTML belonging to a group and tab.

    Args:
        fence_group: The block's group and tab.
        is_new_group: Whether this is the first block rendered for its
            group, which makes it the visible one.
        block_id: The block identifier.
        fence_html: The HTML of the code block itself.
        options: The plugin options.
    """
    group = escapeHtml(raw=fence_group.group)
    tab = escapeHtml(raw=fence_group.tab)
    classes = ["code-block", f"{group}-{tab}"]
    if is_new_group and options.active_code_class:
        classes.append(options.active_code_class)

    copy_button = render_copy_button(block_id=block_id, options=options)
    return (
        f'<div class="{" ".join(classes)}" data-code-group="{group}" '
        f'data-code-id="{block_id}">\n'
        f"{copy_button}{fence_html}</div>\n"
    )


@beartype
def render_standalone_block(
    *,
    block_id: str,
    fence_html: str,
    options: CodeCollectionOptions,
) -> str:
    """
    Wrap rendered fence HTML which is not part of a group.
    """
    copy_button = render_copy_button(block_id=block_id, options=options)
    return (
        f'<div data-code-id="{block_id}" style="position: relative">\n'
        f"{copy_button}{fence_html}</div>\n"
    )
