"""
Domain layer.

The domain layer contains the core logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects defined by attributes
- Domain Services: Stateless operations such as parsing and matching
"""
