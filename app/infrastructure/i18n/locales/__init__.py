"""Translation tables bundled with the package."""
