"""Scenario exporters."""

from poker_drill.export.scenario import ScenarioExporter

__all__ = ["ScenarioExporter"]
