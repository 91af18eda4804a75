"""plugind: HTTP and SSE daemon for plugin_library."""

__version__ = "0.1.0"
