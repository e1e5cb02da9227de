"""Infrastructure layer: the host contract and an in-memory tiling host."""
