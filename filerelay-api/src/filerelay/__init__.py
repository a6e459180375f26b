"""File relay service: forwards uploads and remote files to a webhook."""

__version__ = "0.1.0"
