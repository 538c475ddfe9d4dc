"""
oopconcepts examples package.

This package contains demonstration scripts showing how to use the oopconcepts
harness. These are examples for learning, not tests for verification.

Available examples:
- basic_example.py: Adding a new variant without touching the driver
- advanced_examples.py: Sealed methods, contract introspection and the registry
"""
