"""Port interfaces the core depends on."""
