"""
Application-level API routes.
"""
