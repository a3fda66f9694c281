"""Local JSON history of diagnosis results."""
