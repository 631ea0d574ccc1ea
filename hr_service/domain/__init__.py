"""
Domain layer - Core HR entities and error taxonomy.

This layer contains the fundamental business objects and failure kinds,
independent of any infrastructure or framework concerns.
"""
