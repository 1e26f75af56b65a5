"""Small programs exploring collections, ciphers, hashing, graphs and concurrency."""

__version__ = "0.1.0"