"""HTTP API: routers, dependencies and application factory."""
