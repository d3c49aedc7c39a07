"""Resolver package for the GraphQL schema.

Resolvers receive the strawberry ``Info`` object and pull the service
container and the caller's AuthContext from ``info.context``.
"""
