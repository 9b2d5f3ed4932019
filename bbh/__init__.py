"""Maine sea surface temperature retrieval."""
