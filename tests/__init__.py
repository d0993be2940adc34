"""CYRUSTEST test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible flows through the ``cyrustest`` command line.
- helpers/      : Shared fakes and utilities (no tests here).

General guidance
- Keep unit tests fast and deterministic; prefer fakes over mocks at boundaries.
- Build an explicit registry per test; the process-wide one is reset around
  every test by an autouse fixture.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
