"""Organization-scoped messages API."""
