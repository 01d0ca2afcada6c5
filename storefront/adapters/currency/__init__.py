"""Exchange-rate adapters."""
