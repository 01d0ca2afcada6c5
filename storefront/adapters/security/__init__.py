"""One-time code adapters."""
