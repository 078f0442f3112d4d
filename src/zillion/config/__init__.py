"""Configuration — zillion.toml lookup, settings, and logging setup."""
