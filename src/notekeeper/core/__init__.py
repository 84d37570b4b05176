"""Core layer: storage, repositories, schemas and services."""
