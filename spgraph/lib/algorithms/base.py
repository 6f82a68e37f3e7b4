from __future__ import annotations

from typing import Dict, Union

from spgraph.lib.graph import NodeID

#: Numeric path cost (sum of edge weights).
Cost = Union[int, float]

#: Distance of a node that has not been reached.
UNREACHED: float = float("inf")

#: Distance of a node whose shortest path is unbounded below (negative cycle).
NEGATIVE_CYCLE: float = float("-inf")

#: Result of a single-source run: reached node -> distance from the source.
DistanceMap = Dict[NodeID, float]
