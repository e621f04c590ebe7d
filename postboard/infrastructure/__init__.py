"""
Infrastructure layer package.

Adapters implementing domain ports live here.
"""
