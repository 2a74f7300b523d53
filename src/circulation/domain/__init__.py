"""Domain layer for the circulation service.

Contains business rules: aggregates (items and holds), their state machines,
and the domain events that connect them. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `circulation.adapters` or
`circulation.entrypoints`.
"""
