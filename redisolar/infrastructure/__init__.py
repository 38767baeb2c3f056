"""RediSolar Infrastructure Layer."""
