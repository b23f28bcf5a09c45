"""Channel message converters."""
