"""HTTP boundary: routers, auth dependencies and error translation."""
