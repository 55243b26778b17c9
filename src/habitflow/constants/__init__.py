"""Static option lists shared by the API and seed data."""
