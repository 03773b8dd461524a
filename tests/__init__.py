"""Test suite for charclass-rules.

- unit/: Unit tests for predicates, naming, registry, checks, container and
  logging. No host framework is required: a recording fake validator stands
  in for it.
"""
