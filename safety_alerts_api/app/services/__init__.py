"""
Service layer.

Each service encapsulates the business logic for one alert view or
one resource.  Services receive the ``DataStore`` explicitly and hold
its lock while they read or mutate the collections, so API handlers
stay free of data access code.  Views that depend on ages accept an
optional ``today`` so results are reproducible in tests.
"""
