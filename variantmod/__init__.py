"""JSON Patch, regexp replacement, value merging, HTTP fetching and module manager settings."""

__version__ = "0.1.0"