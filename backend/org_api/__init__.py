"""Organization directory read API."""
