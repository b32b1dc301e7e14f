"""Application layer: use cases and the ports they depend on."""
