from fastapi.testclient import TestClient

AVAILABLE_URL = "/api/v1/transports/available"


class TestFindAvailableTransportsEndpoint:
    def test_by_station(self, client: TestClient):
        response = client.get(AVAILABLE_URL, params={"stationId": 1})

        assert response.status_code == 200
        data = response.json()
        assert data["totalFound"] == 2
        assert [t["id"] for t in data["transports"]] == [1, 2]
        assert data["transports"][0]["station"]["id"] == 1

    def test_by_location_includes_distance(self, client: TestClient):
        response = client.get(AVAILABLE_URL, params={"latitude": 4.6952, "longitude": -74.0307, "radiusKm": 5})

        assert response.status_code == 200
        data = response.json()
        assert [t["id"] for t in data["transports"]] == [1, 2]
        assert all(2 < t["distanceKm"] < 4 for t in data["transports"])
        assert data["searchCenter"] == {"latitude": 4.6952, "longitude": -74.0307}
        assert data["searchRadius"] == 5

    def test_filter_by_type(self, client: TestClient):
        response = client.get(AVAILABLE_URL, params={"type": "electric_scooter"})

        assert [t["id"] for t in response.json()["transports"]] == [2]

    def test_whole_network(self, client: TestClient):
        response = client.get(AVAILABLE_URL)

        assert response.json()["totalFound"] == 2

    def test_latitude_without_longitude(self, client: TestClient):
        response = client.get(AVAILABLE_URL, params={"latitude": 4.6952})

        assert response.status_code == 422

    def test_unknown_type(self, client: TestClient):
        response = client.get(AVAILABLE_URL, params={"type": "skateboard"})

        assert response.status_code == 422
        assert response.json()["field"] == "transport_type"

    def test_out_of_range_coordinate(self, client: TestClient):
        response = client.get(AVAILABLE_URL, params={"latitude": 95, "longitude": 0})

        assert response.status_code == 422
