"""Service layer for the circulation service.

Implements application use-cases: the circulation desk (command handling,
event reactions, transaction boundaries), command routing through the
message bus, and the views returned to callers. Calls domain objects and the
ports defined in `circulation.interfaces`.

Dependency rule: may import `circulation.domain` and `circulation.interfaces`,
but not `circulation.adapters` or `circulation.entrypoints`.
"""
