"""HTTP API layer built on FastAPI.

- **main**: Application factory, lifespan, health and info endpoints
- **routes**: Taxonomy listing and tax calculation routers
- **dependencies**: Providers wiring the store into the domain services
- **middleware**: Security headers, correlation IDs, request logging and
  exception handlers
- **schemas**: Request, response and error models
- **utils**: orjson response class

The API layer translates between HTTP and the domain services; it holds
no business rules of its own.
"""
