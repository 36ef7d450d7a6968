"""Configuration for the code collection plugin."""

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from beartype import beartype

# Option keys of the markdown-it JavaScript plugin.
_LEGACY_KEYS = {
    "activeTab": "active_tab_class",
    "activeCode": "active_code_class",
    "copyTag": "copy_button_tag",
    "copyIcon": "copy_button_icon_classes",
    "copyCSSName": "copy_button_container_class",
}


@beartype
@dataclass(frozen=True)
class CodeCollectionOptions:
    """Options for rendering grouped code blocks.

    Attributes:
        active_tab_class: Class added to the first tab of each tab list.
        active_code_class: Class added to the first code block of each
            group.
        copy_button_tag: The tag of the copy button element.
        copy_button_icon_classes: Icon classes of the copy button element.
        copy_button_container_class: Class identifying the copy button.
        copy_button: Whether to add a copy button to code blocks at all.
        copy_function: The JavaScript function the copy button calls with
            the block identifier.
    """

    active_tab_class: str = "tab-active"
    active_code_class: str = "code-active"
    copy_button_tag: str = "i"
    copy_button_icon_classes: str = "fa-solid fa-copy"
    copy_button_container_class: str = "code-block-copy"
    copy_button: bool = True
    copy_function: str = "copyCode"

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "CodeCollectionOptions":
        """Create options from a mapping.

        Both the field names and the camelCase keys of the markdown-it
        JavaScript plugin (``activeTab``, ``activeCode``, ``copyTag``,
        ``copyIcon``, ``copyCSSName``) are accepted.

        Raises:
            ValueError: If the mapping has a key which is not an option.
        """
        field_names = {field.name for field in dataclasses.fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in mapping.items():
            name = _LEGACY_KEYS.get(key, key)
            if name not in field_names:
                msg = f"Unknown code collection option: {key!r}"
                raise ValueError(msg)
            kwargs[name] = value
        return cls(**kwargs)


DEFAULT_OPTIONS = CodeCollectionOptions()
