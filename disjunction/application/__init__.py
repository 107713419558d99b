"""Application layer: services composing the domain steps."""
