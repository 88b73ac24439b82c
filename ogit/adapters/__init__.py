"""Adapters implementing ports and the terminal UI."""
