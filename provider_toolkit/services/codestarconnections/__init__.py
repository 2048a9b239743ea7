"""AWS CodeStar Connections lookups."""
