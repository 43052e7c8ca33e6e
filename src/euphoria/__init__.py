"""Euphoria journaling bot: environment validation and typed configuration."""
