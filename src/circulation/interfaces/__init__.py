"""Interfaces (application boundary) for the circulation service.

Defines framework-free application contracts: ABCs shared by the service
layer and adapters (repositories, event publishers, units of work, ID
generators). Business rules stay out of this package.

Dependency rule: may import `circulation.domain` types for signatures only.
It may be imported by `circulation.service_layer`, `circulation.adapters`,
and `circulation.bootstrap`.
"""
