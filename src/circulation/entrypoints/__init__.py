"""Entrypoints (inbound adapters) for the circulation service.

Expose the application to the outside world: the ``circulation`` CLI and the
HTTP API. Parse and validate inputs, dispatch commands through the message
bus, and present the resulting views.

Dependency rule: may import `circulation.service_layer` and
`circulation.bootstrap`; avoid reaching into `circulation.adapters` directly.
"""
