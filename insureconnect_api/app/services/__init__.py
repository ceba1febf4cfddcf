"""
Service layer.  Services receive their database handle explicitly and
raise the exceptions from ``core.errors``.
"""
