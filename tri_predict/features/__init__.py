"""
Feature modules for Tri Predict.

Each feature is a self-contained module with:
- models.py - Immutable core dataclasses
- schemas.py - Pydantic schemas
- service.py - Business logic
- calculators/ - Calculation logic (optional)
"""
