"""Resolver package for the GraphQL schema.

Each resolver issues exactly one SQL statement through the Database found in
the GraphQL context and maps the result onto the GraphQL types.
"""
