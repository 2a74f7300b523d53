"""circulation test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Shared behavior enforced across multiple implementations of a port.
- integration/  : Real interactions with a SQLite database file and Alembic.
- functional/   : User-visible flows through the HTTP API and the CLI.
- e2e/          : Top-level CLI options (logging, flight recorder) end to end.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic; prefer fakes over mocks at boundaries.
- Integration hits real dependencies with realistic setup/teardown.
- Functional asserts user-observable results, not internals.
- Contract parametrizes implementations to ensure consistent behavior.
- Markers: unit, contract, integration, functional
"""
