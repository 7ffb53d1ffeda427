"""
UserSearch: paginated search over a fixed collection of person records.

Application package root. This is a small service using hexagonal
architecture (ports & adapters):

Bounded contexts:
    - search: Validating, filtering, sorting and paginating user records.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (XML dataset, token store) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
    - client: Typed HTTP client for the search endpoint.
"""
