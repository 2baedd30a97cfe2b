"""
Pokedex — species information API with fun translations.

Application package root. This is a small service using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - pokedex: Species metadata lookup and description translation.

Layers:
    - domain: Entities, dialect rule, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: HTTP adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
