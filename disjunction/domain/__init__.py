"""
Domain layer module.

This module contains the reciprocal pipeline built on the shared Either type.
It is the reference consumer of the Either API: every step returns an Either
whose Left side is a member of a closed error enumeration.

Key components:
- errors.py: ReciprocalError enumeration and exception-style errors
- models.py: Pydantic report model
- steps/: Pipeline step implementations (parse, reciprocal, stringify)
"""
