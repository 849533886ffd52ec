"""Build directed dependency graph over the resources of one document."""

import networkx as nx
from typing import Dict, Iterator, List, Optional, Tuple
from ..ingest.models import ResourceDocument, ResourceSpec
from ..utils.errors import GraphConstructionError
from ..utils.logging import get_logger

logger = get_logger("graph.dependency_graph")

# ARN path segment for each referenced kind.
_ARN_SEGMENTS = {"queue": "queues/", "preset": "presets/"}


def _reference_name(kind: str, reference: str) -> str:
    """Name part of a reference given as a plain name or an ARN."""
    segment = _ARN_SEGMENTS[kind]
    if reference.startswith("arn:") and segment in reference:
        return reference.split(segment, 1)[1]
    return reference


def _job_template_references(config: Dict) -> Iterator[Tuple[str, str]]:
    """Yield ``(kind, reference)`` for every queue and preset a job template names."""
    if config.get("queue"):
        yield "queue", config["queue"]
    for hop in config.get("hop_destinations") or []:
        if hop.get("queue"):
            yield "queue", hop["queue"]
    for settings in config.get("settings") or []:
        for group in settings.get("output_group") or []:
            for output in group.get("output") or []:
                if output.get("preset"):
                    yield "preset", output["preset"]


class DependencyGraph:
    """Directed dependency graph: nodes=resource addresses, edges=dependent -> dependency."""

    def __init__(self):
        self.graph = nx.DiGraph()
        self._resource_map: Dict[str, ResourceSpec] = {}

    def add_resource(self, spec: ResourceSpec) -> None:
        """Add a resource node (edges are added by build_from_document)."""
        self.graph.add_node(spec.address, kind=spec.kind)
        self._resource_map[spec.address] = spec

    def _find_dependency_node(self, kind: str, reference: str) -> Optional[str]:
        address = f"{kind}.{_reference_name(kind, reference)}"
        if address in self._resource_map:
            return address
        logger.debug(f"Reference not declared in document: {kind} {reference}")
        return None

    def build_from_document(self, document: ResourceDocument) -> None:
        """
        Build the graph for every resource in a document.

        Raises:
            GraphConstructionError: If the graph cannot be built or contains a cycle
        """
        try:
            for spec in document.resources:
                self.add_resource(spec)

            for spec in document.resources:
                if spec.kind != "job_template":
                    continue
                for kind, reference in _job_template_references(spec.config):
                    dep = self._find_dependency_node(kind, reference)
                    if dep and not self.graph.has_edge(spec.address, dep):
                        self.graph.add_edge(spec.address, dep)
                        logger.debug(f"Added dependency edge: {spec.address} -> {dep}")
        except Exception as e:
            raise GraphConstructionError(f"Failed to build dependency graph: {e}")

        if not nx.is_directed_acyclic_graph(self.graph):
            cycle = nx.find_cycle(self.graph)
            raise GraphConstructionError(f"Dependency cycle detected: {cycle}")

        logger.info(
            f"Built dependency graph with {self.graph.number_of_nodes()} nodes "
            f"and {self.graph.number_of_edges()} edges"
        )

    def get_dependencies(self, address: str) -> List[str]:
        """Direct dependencies of a resource."""
        if address not in self.graph:
            return []
        return sorted(self.graph.successors(address))

    def get_dependents(self, address: str) -> List[str]:
        """Resources that directly depend on the given one."""
        if address not in self.graph:
            return []
        return sorted(self.graph.predecessors(address))

    def apply_order(self) -> List[str]:
        """
        Addresses ordered so every dependency comes before its dependents.

        Raises:
            GraphConstructionError: If the graph contains a cycle
        """
        try:
            return list(nx.lexicographical_topological_sort(self.graph.reverse(copy=False)))
        except nx.NetworkXUnfeasible as e:
            raise GraphConstructionError(f"Dependency cycle detected: {e}")

    def destroy_order(self) -> List[str]:
        """Reverse of apply_order: dependents are removed first."""
        return list(reversed(self.apply_order()))
