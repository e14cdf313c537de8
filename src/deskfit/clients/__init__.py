"""Profile input clients."""
