"""
Shared helpers for Lambda handlers: decorators and exception types.
"""
