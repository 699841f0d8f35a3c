"""
Shared helpers for resource provider handlers.
"""
