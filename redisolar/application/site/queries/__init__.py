"""Site Queries."""

from redisolar.application.site.queries.get_sites_nearby import GetSitesNearbyQuery

__all__ = ["GetSitesNearbyQuery"]
