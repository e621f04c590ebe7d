"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Response envelope and error mapping
- CORS middleware
- Rate limiting
- Logging configuration
"""
