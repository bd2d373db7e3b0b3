"""
Tests for the lineage graph model.

- test_models.py: node/link construction primitives and derived queries
- test_validators.py: structural invariant reporting
"""
