"""
Application layer package.

Use cases orchestrate domain ports. No framework imports.
"""
