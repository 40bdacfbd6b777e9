"""Application layer: ports and the drain use case."""
