"""
Pydantic schema definitions for the dataset and API payloads.

Entities (persons, fire stations, medical records) are used both as
request bodies and as the stored records of ``core.datastore``.  Alert
views have their own response models in ``alerts``.  Every model uses
camelCase aliases so that the JSON document and the HTTP payloads keep
their historical field names (``firstName``, ``adultCount``, ...).
"""
