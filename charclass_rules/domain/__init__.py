"""Domain layer - pure rule logic.

Structure:
- validators/: predicates, naming convention, rule catalog, RuleRegistry
- protocols/: host validator and logger ports
- types.py: Pydantic Annotated types backed by the same predicates

No framework or infrastructure dependencies apart from Pydantic in types.py.
"""
