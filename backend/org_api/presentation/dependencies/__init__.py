"""Request-level helpers used by the routers."""
