"""Console entry points, one module per tool."""
