"""YAML loader + schema validation for graph description files.

A graph file lists dense-id edges and a few graph-level flags:

```yaml
name: diamond          # optional
vertices: 4            # optional; otherwise inferred from the edges
directed: true         # optional; false adds every edge in both directions
edges:
  - {source: 0, target: 1, weight: 10}
  - [0, 2, 10]         # compact [source, target, weight]
  - [1, 3]             # weight defaults to 1
```
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

import jsonschema
import yaml

from netalgo.graph.adjacency import Graph
from netalgo.logging import get_logger
from netalgo.types.base import Cost, VertexID

logger = get_logger(__name__)


@dataclass(frozen=True)
class GraphSpec:
    """Validated content of a graph file.

    Attributes:
        name: Optional human-readable name.
        num_vertices: Declared or inferred vertex count.
        directed: False if every edge is to be added in both directions.
        edges: Edge triples in file order.
    """

    name: str
    num_vertices: int
    directed: bool
    edges: Tuple[Tuple[VertexID, VertexID, Cost], ...]

    def build(self) -> Graph:
        """Construct the adjacency-list graph described by this spec."""
        return Graph.from_edges(
            self.edges, num_vertices=self.num_vertices, undirected=not self.directed
        )


def _load_schema() -> Dict[str, Any]:
    try:
        with (
            resources.files("netalgo.schemas")
            .joinpath("graph.json")
            .open("r", encoding="utf-8")
        ) as f:
            return json.load(f)
    except OSError as exc:  # pragma: no cover
        raise RuntimeError(
            "Failed to locate packaged graph schema 'netalgo/schemas/graph.json'."
        ) from exc


def _normalize_edge(entry: Union[Dict[str, Any], List[int]]) -> Tuple[int, int, int]:
    if isinstance(entry, dict):
        return (entry["source"], entry["target"], entry.get("weight", 1))
    if entry[0] < 0 or entry[1] < 0:
        raise ValueError(f"Edge {entry} has a negative vertex id")
    weight = entry[2] if len(entry) == 3 else 1
    return (entry[0], entry[1], weight)


def load_graph_yaml(yaml_str: str) -> GraphSpec:
    """Load and validate a graph description from a YAML string.

    Args:
        yaml_str: YAML document text.

    Returns:
        GraphSpec: The validated description.

    Raises:
        ValueError: If the document is not a mapping, or an edge endpoint is
            outside a declared ``vertices`` count.
        jsonschema.ValidationError: If the document violates the schema.
        yaml.YAMLError: If the text is not parseable YAML.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    jsonschema.validate(data, _load_schema())

    edges = tuple(_normalize_edge(entry) for entry in data.get("edges", []))
    inferred = max((max(u, v) + 1 for u, v, _ in edges), default=0)
    declared = data.get("vertices")
    if declared is not None and inferred > declared:
        raise ValueError(
            f"Edge endpoints reference vertex {inferred - 1} but 'vertices' is {declared}"
        )

    spec = GraphSpec(
        name=data.get("name", ""),
        num_vertices=declared if declared is not None else inferred,
        directed=data.get("directed", True),
        edges=edges,
    )
    logger.debug(
        "Loaded graph '%s': %d vertices, %d edges (directed=%s)",
        spec.name,
        spec.num_vertices,
        len(spec.edges),
        spec.directed,
    )
    return spec


def load_graph_file(path: Union[str, Path]) -> GraphSpec:
    """Load and validate a graph description from a YAML file."""
    return load_graph_yaml(Path(path).read_text(encoding="utf-8"))
