"""Panel dashboard for browsing the collection."""
