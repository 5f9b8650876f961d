"""HTTP API: routers, schemas and dependency wiring."""
