"""Feature modules (blueprints) of the LingoStack app."""
