"""
Umpire - metric threshold checks over HTTP

Layer Structure:
- Domain: Check value objects, aggregators and the metric source contract
- Application: The check evaluation use case and response DTOs
- Infrastructure: Graphite and Librato metric source gateways
- Presentation: FastAPI routers, authentication and error rendering
- Shared: Cross-cutting concerns such as logging and enums
- Main: Composition root, settings and application entry point
"""
