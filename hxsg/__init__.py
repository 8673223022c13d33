"""Game backend: SQLite-backed goods, inventories and messages, with an HTTP inventory API and a WebSocket feed."""

__version__ = "0.1.0"