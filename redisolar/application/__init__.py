"""RediSolar Application Layer."""
