"""Domain contracts independent of the persistence layer."""
