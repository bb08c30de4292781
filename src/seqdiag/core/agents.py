"""
Agent ordering for SEQDIAG sequences.

The registry is the single ordered table of agent names (real, sentinel and
virtual). Bound pairs are placed by recomputing their target positions from
the current ordering.
"""

from collections.abc import Iterable

LEFT_SENTINEL = "["
RIGHT_SENTINEL = "]"
SENTINELS = (LEFT_SENTINEL, RIGHT_SENTINEL)

BLOCK_AGENT_PREFIX = "__BLOCK"


def block_bounds(index: int) -> tuple[str, str]:
    """Names of the virtual boundary agents for the ``index``-th block."""
    name = f"{BLOCK_AGENT_PREFIX}{index}"
    return f"{name}[", f"{name}]"


def merge_names(target: list[str], names: Iterable[str]) -> None:
    """Append each name not already in ``target``, keeping order."""
    seen = set(target)
    for name in names:
        if name not in seen:
            target.append(name)
            seen.add(name)


class AgentRegistry:
    """Insertion-ordered agent table."""

    def __init__(self) -> None:
        self._order: list[str] = []

    def __contains__(self, name: object) -> bool:
        return name in self._order

    def __len__(self) -> int:
        return len(self._order)

    def names(self) -> list[str]:
        """Copy of the current ordering."""
        return list(self._order)

    def define(self, names: Iterable[str]) -> None:
        """Register names not yet known at the end of the ordering."""
        merge_names(self._order, names)

    def place_bounds(
        self,
        left: str,
        right: str,
        involved: Iterable[str] | None = None,
    ) -> None:
        """
        Position a bound pair around a span of agents.

        ``left`` is placed directly before the leftmost involved agent and
        ``right`` directly after the rightmost. With no involved agents in the
        ordering the pair goes around the whole ordering (``involved`` is
        None) or at its end (nothing involved is registered).
        """
        self._order = [name for name in self._order if name not in (left, right)]

        if involved is None:
            index_left = 0
            index_right = len(self._order)
        else:
            positions = {name: i for i, name in enumerate(self._order)}
            found = [positions[name] for name in involved if name in positions]
            index_left = min(found, default=len(self._order))
            index_right = max(found, default=index_left - 1) + 1

        self._order.insert(index_left, left)
        self._order.insert(index_right + 1, right)
