"""
Medical record endpoints for API v1.
"""

from fastapi import APIRouter, Depends, Query, status

from safety_alerts_api.app.api.deps import DataStore, get_datastore
from safety_alerts_api.app.schemas.medical_record import MedicalRecord
from safety_alerts_api.app.services.medical_record_service import MedicalRecordService

router = APIRouter()


@router.post("", response_model=MedicalRecord, status_code=status.HTTP_201_CREATED)
async def create_medical_record(
    record_in: MedicalRecord,
    store: DataStore = Depends(get_datastore),
) -> MedicalRecord:
    """Add the medical record of a person.  Only one record per name is allowed."""
    return MedicalRecordService.create_medical_record(store, record_in)


@router.put("", response_model=MedicalRecord)
async def update_medical_record(
    record_in: MedicalRecord,
    store: DataStore = Depends(get_datastore),
) -> MedicalRecord:
    """Replace birthdate, medications and allergies of an existing record."""
    return MedicalRecordService.update_medical_record(store, record_in)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_medical_record(
    first_name: str = Query(..., alias="firstName"),
    last_name: str = Query(..., alias="lastName"),
    store: DataStore = Depends(get_datastore),
) -> None:
    MedicalRecordService.delete_medical_record(store, first_name, last_name)
    return None
