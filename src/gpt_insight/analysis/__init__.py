"""Scoring core: metrics, synthesis, feedback, trend and style heuristics."""
