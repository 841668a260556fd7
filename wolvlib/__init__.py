"""General-purpose utilities: strings, guards, locks, thread pool, CRC, UUIDs, interval tree, buffered reading, files and sockets."""

__version__ = "0.1.0"