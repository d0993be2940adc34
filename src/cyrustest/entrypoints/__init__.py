"""Entrypoints (inbound adapters) for CYRUSTEST.

Expose the framework to the outside world: the ``cyrustest`` command line.
Parse and validate inputs, call the service layer, and present results.
"""
