"""Resolver package for the GraphQL schema.

Resolvers read from the entity store carried in the GraphQL context and
convert store records into GraphQL types.
"""
