"""Services Layer: async use cases over an AsyncSession.

Invariants:
    - Services own commits; routes never call db.commit()
    - Services raise CampfinderError subclasses, never HTTPException
"""
