"""
Account Service — CRUD REST API for user and admin accounts.

Application package root. A small service using hexagonal
architecture (ports & adapters) backed by MongoDB.

Bounded contexts:
    - accounts: User and admin records (create, read, update, delete).

Layers:
    - domain: Entities, repository port (ABC), storage errors.
    - application: Use cases and DTOs.
    - infrastructure: MongoDB client and repository adapter.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, logging, metrics, security).
"""
