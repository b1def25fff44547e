"""Core command-resolution engine: catalog, matching, rendering, intents."""
