"""Domain layer for CYRUSTEST.

Holds the test case lifecycle, the assertion protocol, run results and the
errors shared by every other layer. Nothing here performs I/O on its own;
diagnostics are handed to whatever report the test case is bound to.
"""
