"""
Pokedex bounded context — domain layer.

This module contains all domain logic for the pokedex context:
- Species metadata and translation entities
- Dialect selection for translated descriptions
- Per-upstream error families
"""
