"""Pokedex HTTP interface: routes, schemas and dependency wiring."""
