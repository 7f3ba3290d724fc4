"""Derive semantic-release branch configuration from versions stored on git branches."""

__version__ = "0.1.0"
