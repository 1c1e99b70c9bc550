"""
Integration tests for the HTTP routes.

The client fixture overrides the data store and the reference date, so
responses are checked against the sample document.
"""

import pytest

PREFIX = "/api/v1"


class TestAlertEndpoints:

    def test_child_alert(self, client):
        response = client.get(f"{PREFIX}/childAlert", params={"address": "1509 Culver St"})
        assert response.status_code == 200
        assert response.json()[0] == {
            "firstName": "Tenley",
            "lastName": "Boyd",
            "age": 12,
            "family": ["John Boyd", "Jacob Boyd", "Felicia Boyd"],
        }

    def test_child_alert_without_children(self, client):
        response = client.get(f"{PREFIX}/childAlert", params={"address": "951 LoneTree Rd"})
        assert response.status_code == 404
        assert "detail" in response.json()

    def test_child_alert_blank_address(self, client):
        assert client.get(f"{PREFIX}/childAlert", params={"address": " "}).status_code == 400

    def test_child_alert_missing_parameter(self, client):
        assert client.get(f"{PREFIX}/childAlert").status_code == 422

    def test_community_email(self, client):
        response = client.get(f"{PREFIX}/communityEmail", params={"city": "seaside"})
        assert response.status_code == 200
        assert response.json() == ["jpeter@email.com"]

    def test_community_email_unknown_city(self, client):
        assert client.get(f"{PREFIX}/communityEmail", params={"city": "Paris"}).status_code == 404

    def test_fire(self, client):
        response = client.get(f"{PREFIX}/fire", params={"address": "892 Downing Ct"})
        assert response.status_code == 200
        body = response.json()
        assert body["station"] == -1
        assert [info["age"] for info in body["fireInfos"]] == [7, -1]

    def test_fire_unknown_address_is_not_an_error(self, client):
        response = client.get(f"{PREFIX}/fire", params={"address": "1 Nowhere"})
        assert response.status_code == 200
        assert response.json() == {"fireInfos": [], "station": -1}

    def test_firestation_coverage(self, client):
        response = client.get(f"{PREFIX}/firestation", params={"stationNumber": 3})
        assert response.status_code == 200
        body = response.json()
        assert (body["adultCount"], body["childCount"]) == (3, 3)
        assert len(body["persons"]) == 6

    @pytest.mark.parametrize("station_number", [1, 4, 99])
    def test_firestation_without_coverage(self, client, station_number):
        response = client.get(f"{PREFIX}/firestation", params={"stationNumber": station_number})
        assert response.status_code == 404

    def test_flood_comma_separated(self, client):
        response = client.get(f"{PREFIX}/flood/stations", params={"stations": "2,4"})
        assert response.status_code == 200
        assert list(response.json()) == ["112 Steppes Pl", "29 15th St", "951 LoneTree Rd"]

    def test_flood_repeated_parameter(self, client):
        response = client.get(f"{PREFIX}/flood/stations", params=[("stations", "2"), ("stations", "4")])
        assert response.status_code == 200
        ron = response.json()["112 Steppes Pl"][0]
        assert ron == {
            "firstName": "Ron",
            "lastName": "Peters",
            "phone": "841-874-8888",
            "age": -1,
            "medications": [],
            "allergies": [],
        }

    @pytest.mark.parametrize("stations", ["", ",", "two", "1,x"])
    def test_flood_bad_station_numbers(self, client, stations):
        response = client.get(f"{PREFIX}/flood/stations", params={"stations": stations})
        assert response.status_code == 400

    def test_flood_without_households(self, client):
        assert client.get(f"{PREFIX}/flood/stations", params={"stations": "1"}).status_code == 404

    def test_phone_alert(self, client):
        response = client.get(f"{PREFIX}/phoneAlert", params={"firestation": 2})
        assert response.status_code == 200
        assert response.json() == ["841-874-6513", "841-874-7458"]

    def test_phone_alert_unknown_station(self, client):
        assert client.get(f"{PREFIX}/phoneAlert", params={"firestation": 1}).status_code == 404

    def test_person_info(self, client):
        response = client.get(f"{PREFIX}/personInfolastName/Carman")
        assert response.status_code == 200
        assert response.json() == [
            {
                "lastName": "Carman",
                "address": "834 Binoc Ave",
                "age": 12,
                "email": "tenz@email.com",
                "medications": [],
                "allergies": [],
            }
        ]

    def test_person_info_unknown(self, client):
        assert client.get(f"{PREFIX}/personInfolastName/Peters").status_code == 404


class TestPersonEndpoints:

    payload = {
        "firstName": "Kendrik",
        "lastName": "Stelzer",
        "address": "947 E. Rose Dr",
        "city": "Culver",
        "zip": 97451,
        "phone": "841-874-7784",
        "email": "bstel@email.com",
    }

    def test_create_then_conflict(self, client):
        response = client.post(f"{PREFIX}/person", json=self.payload)
        assert response.status_code == 201
        assert response.json() == self.payload
        response = client.post(f"{PREFIX}/person", json=self.payload)
        assert response.status_code == 409
        assert "already exists" in response.json()["detail"]

    def test_create_incomplete(self, client):
        response = client.post(f"{PREFIX}/person", json={"firstName": "Ann"})
        assert response.status_code == 400

    def test_update(self, client):
        payload = dict(self.payload, firstName="John", lastName="Boyd")
        response = client.put(f"{PREFIX}/person", json=payload)
        assert response.status_code == 200
        assert response.json()["address"] == "947 E. Rose Dr"

    def test_update_unknown(self, client):
        assert client.put(f"{PREFIX}/person", json=self.payload).status_code == 404

    def test_delete(self, client, store):
        response = client.delete(f"{PREFIX}/person", params={"firstName": "Eric", "lastName": "Cadigan"})
        assert response.status_code == 204
        assert "Cadigan" not in [person.last_name for person in store.persons]

    def test_delete_unknown(self, client):
        response = client.delete(f"{PREFIX}/person", params={"firstName": "Ann", "lastName": "Lee"})
        assert response.status_code == 404

    def test_write_failure(self, client, store, tmp_path):
        store.output_path = str(tmp_path / "missing" / "data.json")
        response = client.post(f"{PREFIX}/person", json=self.payload)
        assert response.status_code == 500


class TestFireStationEndpoints:

    def test_create(self, client):
        response = client.post(f"{PREFIX}/firestation", json={"address": "1 Main St", "station": "5"})
        assert response.status_code == 201
        assert response.json() == {"address": "1 Main St", "station": 5}

    def test_create_duplicate(self, client):
        response = client.post(f"{PREFIX}/firestation", json={"address": "29 15th St", "station": 5})
        assert response.status_code == 409

    def test_create_missing_station(self, client):
        assert client.post(f"{PREFIX}/firestation", json={"address": "1 Main St"}).status_code == 400

    def test_update_changes_coverage(self, client):
        response = client.put(f"{PREFIX}/firestation", json={"address": "112 Steppes Pl", "station": 2})
        assert response.status_code == 200
        response = client.get(f"{PREFIX}/phoneAlert", params={"firestation": 2})
        assert "841-874-8888" in response.json()

    def test_update_same_station(self, client):
        response = client.put(f"{PREFIX}/firestation", json={"address": "112 Steppes Pl", "station": 4})
        assert response.status_code == 409

    def test_delete(self, client):
        assert client.delete(f"{PREFIX}/firestation", params={"address": "112 Steppes Pl"}).status_code == 204
        assert client.get(f"{PREFIX}/phoneAlert", params={"firestation": 4}).status_code == 404

    def test_delete_unknown(self, client):
        assert client.delete(f"{PREFIX}/firestation", params={"address": "1 Main St"}).status_code == 404


class TestMedicalRecordEndpoints:

    payload = {
        "firstName": "Ron",
        "lastName": "Peters",
        "birthdate": "04/06/1965",
        "medications": [],
        "allergies": ["shellfish"],
    }

    def test_create_then_conflict(self, client):
        assert client.post(f"{PREFIX}/medicalRecord", json=self.payload).status_code == 201
        assert client.post(f"{PREFIX}/medicalRecord", json=self.payload).status_code == 409
        response = client.get(f"{PREFIX}/personInfolastName/Peters")
        assert response.json()[0]["allergies"] == ["shellfish"]

    def test_update_unknown(self, client):
        assert client.put(f"{PREFIX}/medicalRecord", json=self.payload).status_code == 404

    def test_update(self, client):
        payload = dict(self.payload, firstName="Eric", lastName="Cadigan")
        response = client.put(f"{PREFIX}/medicalRecord", json=payload)
        assert response.status_code == 200
        assert response.json()["birthdate"] == "04/06/1965"

    def test_delete(self, client):
        params = {"firstName": "Eric", "lastName": "Cadigan"}
        assert client.delete(f"{PREFIX}/medicalRecord", params=params).status_code == 204
        assert client.delete(f"{PREFIX}/medicalRecord", params=params).status_code == 404

    def test_delete_blank_name(self, client):
        params = {"firstName": "Eric", "lastName": ""}
        assert client.delete(f"{PREFIX}/medicalRecord", params=params).status_code == 400
