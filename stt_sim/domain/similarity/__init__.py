"""Similarity scoring domain: entities and services."""
