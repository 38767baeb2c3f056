"""RediSolar.

Redis 기반 태양광 사이트/계측 데이터 접근 계층입니다.
"""

__version__ = "1.0.0"
