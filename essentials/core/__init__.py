"""Core building blocks: commands, error handling, events, config, logging."""
