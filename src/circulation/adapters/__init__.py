"""Adapters (infrastructure) for the circulation service.

Provide concrete implementations of the ports in `circulation.interfaces`
(repositories, event publisher, unit of work, ID generators), plus persistence
mapping and related wiring (engines, metadata, migrations).

Dependency rule: may import `circulation.domain` and `circulation.interfaces`;
the domain must not import this package.
"""
