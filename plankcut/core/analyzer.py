"""Main cut analyzer — runs requirement generation, allocation and aggregation."""

from __future__ import annotations
import logging

from plankcut.models import CutList, ProjectConfig
from plankcut.core.requirements import RequirementGenerator
from plankcut.core.allocator import Allocator
from plankcut.core.aggregator import ResultAggregator

logger = logging.getLogger(__name__)


class CutAnalyzer:
    """
    Stateless cut analyzer.

    Takes a project configuration, works out the board segments the
    layout needs, assigns them to stock, and returns a complete CutList.
    Nothing is kept between calls, so a layout search can score as many
    candidate offsets as it likes, from as many threads as it likes.
    """

    def __init__(
        self,
        generator: RequirementGenerator | None = None,
        allocator: Allocator | None = None,
        aggregator: ResultAggregator | None = None,
    ) -> None:
        self.generator = generator or RequirementGenerator()
        self.allocator = allocator or Allocator()
        self.aggregator = aggregator or ResultAggregator()

    def analyze(self, config: ProjectConfig) -> CutList:
        requirements = self.generator.generate(config)
        allocation = self.allocator.allocate(requirements, config)
        cut_list = self.aggregator.aggregate(requirements, allocation)

        logger.debug(
            "Analysis of %r: %d planks, efficiency %.1f%%",
            config.name, cut_list.full_planks, cut_list.efficiency,
        )
        return cut_list
