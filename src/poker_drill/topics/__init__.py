"""Topic generators, one module per street."""
