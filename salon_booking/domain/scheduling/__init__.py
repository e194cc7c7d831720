"""
Scheduling Domain

Appointment booking for a single scheduling resource (one barber):

- overlap.py  - half-open interval overlap test and conflict search
- status.py   - appointment statuses and the optional transition guard
- service.py  - booking pipeline (resolve services, freeze totals, conflict
                check, persist) under the scheduling lock, status updates
- router.py   - /appointments endpoints
"""

from .router import router

__all__ = ["router"]
