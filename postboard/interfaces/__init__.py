"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request schemas, the presenter
and the auth dependency. No business logic belongs here.
Routes call collaborators and return presented payloads.
"""
