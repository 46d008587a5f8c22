"""Version 1 of the Catalog API."""
