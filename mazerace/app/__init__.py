"""Generation pipeline orchestration."""
