"""
Maximum bipartite matching: greedy seeding followed by Kuhn's
augmenting-path search from every left vertex the seed left unmatched.

match[right] holds the left vertex paired with it, or UNMATCHED.
"""
from typing import List, Optional, Tuple

import config as cfg
import wall_utils.logging as logging
from exceptions import ConfigError, MatchingError
from graph_builder import BipartiteGraph
from wall_utils.decorators import log_and_time

logger = logging.getLogger(__name__)

UNMATCHED = -1


class MatchingEngine:
    def __init__(self, graph: BipartiteGraph, search_mode: Optional[str] = None):
        mode = search_mode or cfg.SOLVER.SearchMode
        if mode == "iterative":
            self._augment = self._augment_iterative
        elif mode == "recursive":
            self._augment = self._augment_recursive
        else:
            raise ConfigError(f"Unknown search mode: {mode!r}")
        self.search_mode = mode
        self.graph = graph
        self.match: List[int] = [UNMATCHED] * graph.right_size
        self.seeded: List[bool] = [False] * graph.left_size
        self.visited: List[bool] = [False] * graph.left_size

    def seed(self) -> int:
        """Greedy pass: each left vertex takes its first unclaimed right neighbor."""
        match = self.match
        seeded_count = 0
        for left, neighbors in enumerate(self.graph.adjacency):
            for right in neighbors:
                if match[right] == UNMATCHED:
                    match[right] = left
                    self.seeded[left] = True
                    seeded_count += 1
                    break
        logger.debug("Greedy seed matched %d of %d left vertices", seeded_count, self.graph.left_size)
        return seeded_count

    def improve(self) -> int:
        """One augmenting attempt per left vertex the seed did not match."""
        augmented = 0
        for left in range(self.graph.left_size):
            if self.seeded[left]:
                continue
            self.visited = [False] * self.graph.left_size
            if self._augment(left):
                augmented += 1
        logger.debug("Augmenting search added %d pairs", augmented)
        return augmented

    @log_and_time("matching", error_cls=MatchingError)
    def run(self) -> int:
        self.seed()
        self.improve()
        size = self.matching_size()
        logger.info("Maximum matching size %d (%s search)", size, self.search_mode)
        return size

    def matching_size(self) -> int:
        return sum(1 for left in self.match if left != UNMATCHED)

    def pairs(self) -> List[Tuple[int, int]]:
        """Matched (left, right) pairs ordered by left vertex."""
        return sorted((left, right) for right, left in enumerate(self.match) if left != UNMATCHED)

    def _augment_recursive(self, vertex: int) -> bool:
        if self.visited[vertex]:
            return False
        self.visited[vertex] = True

        for to in self.graph.adjacency[vertex]:
            if self.match[to] == UNMATCHED or self._augment_recursive(self.match[to]):
                self.match[to] = vertex
                return True
        return False

    def _augment_iterative(self, start: int) -> bool:
        # Same walk as _augment_recursive; frames are [vertex, next neighbor index]
        adjacency = self.graph.adjacency
        match = self.match
        visited = self.visited
        if visited[start]:
            return False
        visited[start] = True
        stack = [[start, 0]]

        while stack:
            frame = stack[-1]
            vertex, i = frame
            neighbors = adjacency[vertex]
            if i == len(neighbors):
                stack.pop()
                continue
            to = neighbors[i]
            frame[1] = i + 1

            owner = match[to]
            if owner == UNMATCHED:
                # Flip the path: every frame takes the neighbor it was trying
                for v, next_index in reversed(stack):
                    match[adjacency[v][next_index - 1]] = v
                return True
            if not visited[owner]:
                visited[owner] = True
                stack.append([owner, 0])

        return False
