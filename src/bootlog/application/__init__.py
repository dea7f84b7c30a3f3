"""Application layer: ports and use cases of the logging sink."""
