"""Site DTOs."""

from redisolar.application.site.dto.nearby_sites_request import NearbySitesRequest

__all__ = ["NearbySitesRequest"]
