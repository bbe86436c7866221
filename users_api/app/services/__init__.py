"""
Service layer abstraction.

The user store encapsulates all record keeping.  By isolating it here
the in‑memory list can later be swapped for another backend without
changing API handlers.
"""
