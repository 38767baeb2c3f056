"""Redis Persistence Layer."""

from redisolar.infrastructure.persistence_redis.client import build_redis_client
from redisolar.infrastructure.persistence_redis.key_generator import RedisKeyGenerator
from redisolar.infrastructure.persistence_redis.metric_redis import RedisMetricDAO
from redisolar.infrastructure.persistence_redis.site_codec import SiteHashCodec
from redisolar.infrastructure.persistence_redis.site_geo_redis import RedisSiteGeoDAO

__all__ = [
    "build_redis_client",
    "RedisKeyGenerator",
    "RedisMetricDAO",
    "RedisSiteGeoDAO",
    "SiteHashCodec",
]
