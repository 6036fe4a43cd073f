"""Remote invalidator implementations."""

from cacheworker.infrastructure.invalidators.graphql import GraphQLRemoteInvalidator

__all__ = ["GraphQLRemoteInvalidator"]
