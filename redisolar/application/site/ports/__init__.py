"""Site Ports."""

from redisolar.application.site.ports.site_geo_gateway import SiteGeoGateway

__all__ = ["SiteGeoGateway"]
