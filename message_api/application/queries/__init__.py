"""Read-side use cases."""
