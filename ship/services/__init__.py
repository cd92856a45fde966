"""Release pipeline services."""
