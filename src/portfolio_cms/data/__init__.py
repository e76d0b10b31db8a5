"""Persistence layer: engine management and the document store."""
