"""
Pytest configuration and fixtures.

Every test gets its own copy of a small dataset written to a temporary
directory, so mutations and saves never touch the bundled data file.
Ages are computed against a fixed date.
"""

import copy
import json
from datetime import date

import pytest
from fastapi.testclient import TestClient

from safety_alerts_api.app.api.deps import get_datastore, get_today
from safety_alerts_api.app.core.datastore import DataStore
from safety_alerts_api.app.main import app

TODAY = date(2024, 9, 4)


def _person(first, last, address, phone, email, city="Culver", zip_code=97451):
    return {
        "firstName": first,
        "lastName": last,
        "address": address,
        "city": city,
        "zip": zip_code,
        "phone": phone,
        "email": email,
    }


def _record(first, last, birthdate, medications=None, allergies=None):
    return {
        "firstName": first,
        "lastName": last,
        "birthdate": birthdate,
        "medications": medications or [],
        "allergies": allergies or [],
    }


SAMPLE_DATA = {
    "persons": [
        _person("John", "Boyd", "1509 Culver St", "841-874-6512", "jaboyd@email.com"),
        _person("Jacob", "Boyd", "1509 Culver St", "841-874-6513", "drk@email.com"),
        _person("Tenley", "Boyd", "1509 Culver St", "841-874-6512", "tenz@email.com"),
        _person("Roger", "Boyd", "1509 Culver St", "841-874-6512", "jaboyd@email.com"),
        _person("Felicia", "Boyd", "1509 Culver St", "841-874-6544", "jaboyd@email.com"),
        _person("Jonanathan", "Marrack", "29 15th St", "841-874-6513", "drk@email.com"),
        _person("Tessa", "Carman", "834 Binoc Ave", "841-874-6512", "tenz@email.com"),
        _person("Eric", "Cadigan", "951 LoneTree Rd", "841-874-7458", "gramps@email.com"),
        _person("Ron", "Peters", "112 Steppes Pl", "841-874-8888", "jpeter@email.com", city="Seaside"),
        _person("Zach", "Zemicks", "892 Downing Ct", "841-874-7512", "zarc@email.com"),
        _person("Warren", "Zemicks", "892 Downing Ct", "841-874-7512", "ward@email.com"),
    ],
    "firestations": [
        {"address": "1509 Culver St", "station": 3},
        {"address": "29 15th St", "station": 2},
        {"address": "834 Binoc Ave", "station": 3},
        {"address": "951 LoneTree Rd", "station": 2},
        {"address": "112 Steppes Pl", "station": 4},
        {"address": "644 Gershwin Cir", "station": 1},
    ],
    # Jacob and Felicia come after the children on purpose.
    "medicalrecords": [
        _record("John", "Boyd", "03/06/1984", ["aznol:350mg", "hydrapermazol:100mg"], ["nillacilan"]),
        _record("Tenley", "Boyd", "02/18/2012", [], ["peanut"]),
        _record("Roger", "Boyd", "09/06/2017"),
        _record("Jacob", "Boyd", "03/06/1989", ["pharmacol:5000mg", "terazine:10mg", "noznazol:250mg"]),
        _record("Felicia", "Boyd", "01/08/1986", ["tetracyclaz:650mg"], ["xilliathal"]),
        _record("Jonanathan", "Marrack", "01/03/1989"),
        _record("Tessa", "Carman", "02/18/2012"),
        _record("Eric", "Cadigan", "08/06/1945", ["tradoxidine:400mg"]),
        _record("Zach", "Zemicks", "03/06/2017"),
        _record("Warren", "Zemicks", "15/15/1989"),
    ],
}


@pytest.fixture
def sample_data():
    """A fresh copy of the sample document."""
    return copy.deepcopy(SAMPLE_DATA)


@pytest.fixture
def data_file(tmp_path, sample_data):
    """Sample document written to a temporary file."""
    path = tmp_path / "data.json"
    path.write_text(json.dumps(sample_data), encoding="utf-8")
    return path


@pytest.fixture
def store(data_file):
    """Store loaded from ``data_file`` and persisting back to it."""
    datastore = DataStore(output_path=str(data_file))
    assert datastore.load(str(data_file))
    return datastore


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def client(store):
    """API client bound to the test store and the fixed date."""
    app.dependency_overrides[get_datastore] = lambda: store
    app.dependency_overrides[get_today] = lambda: TODAY
    yield TestClient(app)
    app.dependency_overrides.clear()
