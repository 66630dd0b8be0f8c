"""Service Layer — business rules in front of the store."""
