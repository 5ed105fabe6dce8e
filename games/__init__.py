"""Game web service package

Splatoon 2 ends in an ``iksm_session`` cookie, Splatoon 3 in a bullet token
usable for persisted GraphQL queries.
"""

from . import splatoon2, splatoon3
from .graphql import PersistedQuery, graphql_query

__all__ = [
    "splatoon2",
    "splatoon3",
    "PersistedQuery",
    "graphql_query",
]
