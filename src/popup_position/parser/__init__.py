"""Scenario file parsing."""

from popup_position.parser.scenario import Scenario, parse_scenario

__all__ = ["Scenario", "parse_scenario"]
