"""Constants for the HSL API adapter.

Uses the Digitransit routing GraphQL API.
API Documentation: https://digitransit.fi/en/developers/apis/1-routing-api/

A subscription key is required and is sent as the
``digitransit-subscription-key`` header.
"""

HSL_GRAPHQL_URL = "https://api.digitransit.fi/routing/v2/hsl/gtfs/v1"

SUBSCRIPTION_KEY_HEADER = "digitransit-subscription-key"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}

# Name under which the shared rate limiter is registered
HSL_RATE_LIMITER_NAME = "hsl_api"
