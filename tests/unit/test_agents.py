"""Tests for the agent ordering registry."""

from seqdiag.core.agents import AgentRegistry, block_bounds, merge_names


def registry(*names: str) -> AgentRegistry:
    reg = AgentRegistry()
    reg.define(names)
    return reg


def test_block_bounds() -> None:
    assert block_bounds(0) == ("__BLOCK0[", "__BLOCK0]")
    assert block_bounds(12) == ("__BLOCK12[", "__BLOCK12]")


def test_merge_names_keeps_first_occurrence() -> None:
    target = ["a", "b"]
    merge_names(target, ["b", "c", "a", "c"])
    assert target == ["a", "b", "c"]


class TestDefine:
    def test_insertion_order(self) -> None:
        reg = registry("B", "A", "B")
        assert reg.names() == ["B", "A"]
        assert len(reg) == 2
        assert "A" in reg
        assert "C" not in reg

    def test_names_is_a_copy(self) -> None:
        reg = registry("A")
        reg.names().append("B")
        assert reg.names() == ["A"]


class TestPlaceBounds:
    def test_wraps_everything_without_involved(self) -> None:
        reg = registry("A", "B")
        reg.place_bounds("[", "]")
        assert reg.names() == ["[", "A", "B", "]"]

    def test_wraps_involved_span(self) -> None:
        reg = registry("A", "B", "C", "D")
        reg.place_bounds("<", ">", ["C", "B"])
        assert reg.names() == ["A", "<", "B", "C", ">", "D"]

    def test_existing_bounds_are_moved(self) -> None:
        reg = registry("<", "A", "B", ">", "C")
        reg.place_bounds("<", ">", ["<", ">", "B", "C"])
        assert reg.names() == ["A", "<", "B", "C", ">"]

    def test_unknown_involved_appends(self) -> None:
        reg = registry("A")
        reg.place_bounds("<", ">", ["X"])
        assert reg.names() == ["A", "<", ">"]

    def test_nested_bounds(self) -> None:
        reg = registry("A", "B", "C", "i[", "i]")
        reg.place_bounds("i[", "i]", ["C"])
        reg.define(["o[", "o]"])
        reg.place_bounds("o[", "o]", ["B", "i[", "i]", "C"])
        assert reg.names() == ["A", "o[", "B", "i[", "C", "i]", "o]"]
