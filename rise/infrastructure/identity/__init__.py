"""Bearer-token identity for incoming requests."""
