"""Bootstrap (composition root) for the circulation service.

Assembles the application at runtime: wires concrete adapters (unit of work,
event publisher, ID generator) to the circulation desk, subscribes the desk to
the hold events it reacts to, and builds the message bus that entrypoints
talk to.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces/domain).
- This package may import: `circulation.adapters`, `circulation.service_layer`,
  `circulation.interfaces`, `circulation.domain`, and `circulation.config`.
- Inner layers must not import `circulation.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly and lifecycle only.
"""

from .bootstrap import AppContainer, bootstrap, bootstrap_in_memory

__all__ = ["AppContainer", "bootstrap", "bootstrap_in_memory"]
