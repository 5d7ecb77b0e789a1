"""Infrastructure adapters implementing domain protocols."""
