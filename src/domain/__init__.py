"""
Domain Layer - Pure Lesson Logic

This layer contains:
- Entities: Products, employees and the capability demonstrations
- Value Objects: Immutable objects without identity
- Interfaces: Capabilities that entities implement (Payable, Flyable, ...)
- Services: Domain logic that doesn't fit in entities (payroll, reports)

No external dependencies allowed in this layer.
"""
