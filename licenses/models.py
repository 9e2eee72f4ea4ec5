"""
Model registration for the licenses app.

Django discovers models through this module; the definitions live in
licenses.infrastructure.models.
"""
from licenses.infrastructure.models import License  # noqa: F401
