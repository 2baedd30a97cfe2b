"""
Pokedex infrastructure adapters.

HTTP clients for the species metadata and translation upstreams.
"""
