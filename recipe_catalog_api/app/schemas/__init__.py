"""
Pydantic schema definitions for the recipe catalog.

Each domain (recipes, ratings, users) defines its own models for the
stored entity and for the input payload clients send.  The modules
also hold the pure functions that build new entities and apply
updates, stamping timestamps as they go.
"""
