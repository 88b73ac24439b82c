"""ogit - an interactive controller for git working copies."""
