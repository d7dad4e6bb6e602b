"""
Core building blocks for simple-dto.

This package holds:
- the entity base class (`dto.py`)
- the typed entity collection (`collection.py`)
- the pydantic wire bridge (`wire.py`)
- configuration loading (`config.py`)
- shared error types (`errors.py`)
- logging helpers (`logging.py`)
"""
