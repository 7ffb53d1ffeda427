"""
Interfaces layer package.

FastAPI routers and Pydantic schemas. Routers delegate to use cases;
no business logic belongs here.
"""
