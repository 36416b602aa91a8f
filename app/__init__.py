"""HTTP surface for the retrieval function selection lab."""
