"""HSL API adapters for the Digitransit GraphQL service."""

from stop_catalog.adapters.hsl_api.graphql_client import HslGraphQLClient

__all__ = ["HslGraphQLClient"]
