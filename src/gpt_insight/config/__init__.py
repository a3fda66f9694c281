"""Constants for GPT Insight."""
