"""
Social bounded context: domain layer.

Users write short text posts; sessions identify the user behind a request.
"""
