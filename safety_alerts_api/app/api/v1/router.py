"""
Top‑level router for version 1 of the API.

The route names (``/childAlert``, ``/personInfolastName`` ...) are the
ones existing dispatch clients already call, so they keep their
camelCase spelling.
"""

from fastapi import APIRouter

from .endpoints import (
    child_alert,
    community_email,
    fire,
    firestations,
    flood,
    medical_records,
    person_info,
    persons,
    phone_alert,
)

router = APIRouter()

router.include_router(child_alert.router, prefix="/childAlert", tags=["alerts"])
router.include_router(community_email.router, prefix="/communityEmail", tags=["alerts"])
router.include_router(fire.router, prefix="/fire", tags=["alerts"])
router.include_router(flood.router, prefix="/flood", tags=["alerts"])
router.include_router(phone_alert.router, prefix="/phoneAlert", tags=["alerts"])
router.include_router(person_info.router, prefix="/personInfolastName", tags=["alerts"])
# GET /firestation is the coverage view; POST/PUT/DELETE manage stations
router.include_router(firestations.router, prefix="/firestation", tags=["firestations"])
router.include_router(persons.router, prefix="/person", tags=["persons"])
router.include_router(medical_records.router, prefix="/medicalRecord", tags=["medical records"])
