"""
Endpoint modules.  Each defines an ``APIRouter`` that is aggregated in
``api/router.py``.
"""
