"""Infrastructure layer: persistence, HTTP and external adapters."""
