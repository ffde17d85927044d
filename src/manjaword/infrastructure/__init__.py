"""Infrastructure layer: filesystem, export writers, HTTP and dialog adapters."""
