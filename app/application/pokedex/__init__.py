"""
Pokedex application layer.

Use cases orchestrating the species and translation ports.
"""
