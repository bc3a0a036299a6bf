"""High-level cut analysis service — facade for the API layer."""

from __future__ import annotations

from plankcut.models import CutList, CutSummary, ProjectConfig
from plankcut.core.analyzer import CutAnalyzer


class CutService:
    """Fills in defaults, delegates to the analyzer, summarizes output."""

    def __init__(self, analyzer: CutAnalyzer | None = None) -> None:
        self.analyzer = analyzer or CutAnalyzer()

    def analyze(self, config: ProjectConfig | None = None) -> CutList:
        if config is None:
            config = ProjectConfig()
        return self.analyzer.analyze(config)

    def analyze_offsets(
        self, config: ProjectConfig, row_offsets: list[float],
    ) -> CutList:
        """Analyze a candidate set of row offsets without touching `config`."""
        return self.analyzer.analyze(config.with_row_offsets(row_offsets))

    def summarize(self, cut_list: CutList) -> CutSummary:
        return CutSummary.from_cut_list(cut_list)

    def default_config(self) -> ProjectConfig:
        return ProjectConfig()
