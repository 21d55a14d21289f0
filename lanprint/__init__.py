"""Print documents on the host's printers from any device on the LAN."""

__version__ = "0.1.0"
