"""
Postboard: a small posting board HTTP API.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - social: Service metadata, users, posts and sessions.

Layers:
    - domain: Entities, reference types, ports (ABCs), errors.
    - application: Use cases, DTOs, the collaborator bundle.
    - infrastructure: Adapters implementing domain ports.
    - interfaces: FastAPI routers, request schemas, presenter.
    - shared: Cross-cutting concerns (envelope, errors, CORS, logging).
"""
