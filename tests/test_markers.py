"""
Tests for the grouping marker syntax.
"""

import logging

import pytest

from mdit_code_collection.markers import (
    FenceGroup,
    GroupMarker,
    is_close_marker,
    normalize_name,
    parse_fence_group,
    parse_open_marker,
    parse_tab_labels,
)


class TestParseOpenMarker:
    """
    Tests for parse_open_marker.
    """

    def test_marker(self) -> None:
        """
        The group name and tabs are extracted in order.
        """
        marker = parse_open_marker(
            content='{{ group="group1" tabs=["tab1", "tab2", "tab3"] }}',
        )
        assert marker == GroupMarker(
            group="group1",
            tabs=("tab1", "tab2", "tab3"),
        )

    def test_whitespace_tolerant(self) -> None:
        """
        Whitespace around the braces and attributes is optional.
        """
        compact = parse_open_marker(content='{{group="g" tabs=["A","B"]}}')
        spaced = parse_open_marker(
            content='{{   group="g"    tabs=[ "A" ,  "B" ]   }}',
        )
        assert compact == spaced == GroupMarker(group="g", tabs=("A", "B"))

    def test_not_a_marker(self) -> None:
        """
        Ordinary text is not a marker.
        """
        assert parse_open_marker(content="Some {{ text }} here") is None

    def test_empty_tab_list(self) -> None:
        """
        An empty tab list gives no tabs.
        """
        marker = parse_open_marker(content='{{ group="g" tabs=[] }}')
        assert marker == GroupMarker(group="g", tabs=())

    def test_missing_tab_list(self) -> None:
        """
        A marker without tabs gives no tabs.
        """
        marker = parse_open_marker(content='{{ group="g" }}')
        assert marker == GroupMarker(group="g", tabs=())

    def test_malformed_tab_list(self) -> None:
        """
        A tab list without brackets gives no tabs rather than an error.
        """
        marker = parse_open_marker(content='{{ group="g" tabs="A", "B" }}')
        assert marker == GroupMarker(group="g", tabs=())


class TestParseTabLabels:
    """
    Tests for parse_tab_labels.
    """

    def test_quotes_stripped(self) -> None:
        """
        Double and single quotes are removed from labels.
        """
        assert parse_tab_labels(raw="[\"Python\", 'Rust']") == (
            "Python",
            "Rust",
        )

    def test_labels_with_spaces(self) -> None:
        """
        Spaces inside a label are kept.
        """
        assert parse_tab_labels(raw='["Node JS", "Go"]') == ("Node JS", "Go")

    def test_empty_items_dropped(self) -> None:
        """
        Empty items from stray commas are dropped.
        """
        assert parse_tab_labels(raw='["A", , "B",]') == ("A", "B")

    def test_empty(self) -> None:
        """
        Empty input gives no labels.
        """
        assert parse_tab_labels(raw="  ") == ()

    def test_malformed_is_logged(
        self,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """
        A list without brackets is logged and gives no labels.
        """
        with caplog.at_level(logging.WARNING):
            assert parse_tab_labels(raw='["A", "B"') == ()
        assert "Ignoring malformed tab list" in caplog.text


class TestIsCloseMarker:
    """
    Tests for is_close_marker.
    """

    @pytest.mark.parametrize(
        argnames="content",
        argvalues=["{{ /group }}", "{{/group}}", "  {{   /group  }} "],
    )
    def test_close_marker(self, content: str) -> None:
        """
        Close markers are recognized with any whitespace.
        """
        assert is_close_marker(content=content)

    @pytest.mark.parametrize(
        argnames="content",
        argvalues=["{{ group }}", "text {{ /group }}", "{{ /groups }}"],
    )
    def test_not_close_marker(self, content: str) -> None:
        """
        Only a whole close marker matches.
        """
        assert not is_close_marker(content=content)


class TestNormalizeName:
    """
    Tests for normalize_name.
    """

    def test_lowercase(self) -> None:
        """
        Names are lowercased.
        """
        assert normalize_name(name="JavaScript") == "javascript"

    def test_first_space_only(self) -> None:
        """
        Only the first space is replaced.
        """
        assert normalize_name(name="Hello big World") == "hello-big world"


class TestParseFenceGroup:
    """
    Tests for parse_fence_group.
    """

    def test_group_and_tab(self) -> None:
        """
        Both attributes are found and normalized.
        """
        fence_group = parse_fence_group(info='js group="Demo" tab="Node JS"')
        assert fence_group == FenceGroup(group="demo", tab="node-js")

    def test_attribute_order(self) -> None:
        """
        The attributes may come in any order.
        """
        fence_group = parse_fence_group(info='python tab="B" group="g"')
        assert fence_group == FenceGroup(group="g", tab="b")

    @pytest.mark.parametrize(
        argnames="info",
        argvalues=[
            "python",
            'python group="g"',
            'python tab="t"',
            'python group=g tab="t"',
            'python group="" tab="t"',
            'python subgroup="g" tab="t"',
            'python group="g" data-tab="t"',
        ],
    )
    def test_no_group(self, info: str) -> None:
        """
        Missing or malformed attributes mean no group.
        """
        assert parse_fence_group(info=info) is None
