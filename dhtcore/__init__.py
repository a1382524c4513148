"""dhtcore: the entry aspect model for a content-addressed DHT node."""

__version__ = "0.1.0"
