"""Services used around the diff engine: settings, file input, caching."""
