"""
Application Layer

This layer contains use cases (application logic) and DTOs (data transfer objects).
It orchestrates domain scoring services without containing scoring rules itself.
"""
