"""Domain models: commands, modes, entities, config and errors."""
