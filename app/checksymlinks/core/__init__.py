"""Core configuration and theming for checksymlinks."""
