"""
Tests for the /rest/players endpoints.
"""
from datetime import datetime

from services.time_service import to_epoch_millis


def payload(**overrides):
    body = {
        "name": "Newbie",
        "title": "Fresh Blood",
        "race": "HOBBIT",
        "profession": "DRUID",
        "birthday": to_epoch_millis(datetime(2012, 8, 8, 10, 30)),
        "experience": 100,
    }
    body.update(overrides)
    return body


class TestListEndpoint:

    def test_default_page(self, client):
        response = client.get("/rest/players")
        assert response.status_code == 200
        body = response.json()
        assert [p["id"] for p in body] == [1, 2, 3]
        assert body[0] == {
            "id": 1,
            "name": "Alice",
            "title": "Knight",
            "race": "HUMAN",
            "profession": "WARRIOR",
            "experience": 100,
            "level": 1,
            "untilNextLevel": 200,
            "birthday": to_epoch_millis(datetime(2005, 1, 1)),
            "banned": False,
        }

    def test_out_of_range_page(self, client):
        response = client.get("/rest/players", params={"pageNumber": 50, "pageSize": 3})
        assert response.status_code == 200
        assert response.json() == []

    def test_order_and_page_size(self, client):
        response = client.get("/rest/players", params={"order": "EXPERIENCE", "pageSize": 5})
        assert [p["id"] for p in response.json()] == [4, 1, 2, 5, 3]

    def test_filters(self, client):
        response = client.get(
            "/rest/players",
            params={"race": "HUMAN", "banned": "true", "minLevel": 10},
        )
        assert [p["name"] for p in response.json()] == ["Eve"]

    def test_birthday_filter(self, client):
        response = client.get(
            "/rest/players",
            params={"before": to_epoch_millis(datetime(2005, 1, 1))},
        )
        assert [p["name"] for p in response.json()] == ["Carol"]

    def test_unknown_order_is_bad_request(self, client):
        response = client.get("/rest/players", params={"order": "TITLE"})
        assert response.status_code == 400

    def test_negative_page_is_bad_request(self, client):
        response = client.get("/rest/players", params={"pageNumber": -1})
        assert response.status_code == 400


class TestCountEndpoint:

    def test_count_all(self, client):
        response = client.get("/rest/players/count")
        assert response.status_code == 200
        assert response.json() == 5

    def test_count_filtered(self, client):
        assert client.get("/rest/players/count", params={"title": "Shadow"}).json() == 2

    def test_contradictory_filters(self, client):
        response = client.get(
            "/rest/players/count",
            params={"minExperience": 100, "maxExperience": 50},
        )
        assert response.json() == 0


class TestCreateEndpoint:

    def test_create(self, client):
        response = client.post("/rest/players", json=payload())
        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 6
        assert body["level"] == 1
        assert body["untilNextLevel"] == 200
        assert body["banned"] is False
        assert body["birthday"] == payload()["birthday"]

    def test_supplied_id_is_bad_request(self, client):
        response = client.post("/rest/players", json=payload(id=10))
        assert response.status_code == 400
        assert client.get("/rest/players/count").json() == 5

    def test_long_name_is_bad_request(self, client):
        response = client.post("/rest/players", json=payload(name="n" * 13))
        assert response.status_code == 400
        assert "name" in response.json()["detail"]

    def test_birthday_year_out_of_range(self, client):
        birthday = to_epoch_millis(datetime(1999, 6, 1))
        response = client.post("/rest/players", json=payload(birthday=birthday))
        assert response.status_code == 400

    def test_unknown_race_is_bad_request(self, client):
        response = client.post("/rest/players", json=payload(race="DRAGON"))
        assert response.status_code == 400


class TestGetEndpoint:

    def test_get(self, client):
        response = client.get("/rest/players/3")
        assert response.status_code == 200
        assert response.json()["name"] == "Carol"

    def test_zero_and_negative_ids(self, client):
        assert client.get("/rest/players/0").status_code == 400
        assert client.get("/rest/players/-1").status_code == 400

    def test_non_numeric_id(self, client):
        assert client.get("/rest/players/abc").status_code == 400

    def test_missing(self, client):
        assert client.get("/rest/players/999999").status_code == 404


class TestUpdateEndpoint:

    def test_title_only(self, client):
        before = client.get("/rest/players/1").json()
        response = client.post("/rest/players/1", json={"title": "Lord Commander"})
        assert response.status_code == 200
        after = response.json()
        assert after["title"] == "Lord Commander"
        assert {k: v for k, v in after.items() if k != "title"} == \
            {k: v for k, v in before.items() if k != "title"}

    def test_id_in_body_is_ignored(self, client):
        response = client.post("/rest/players/1", json={"id": 5, "name": "Alicia"})
        assert response.status_code == 200
        assert response.json()["id"] == 1
        assert client.get("/rest/players/5").json()["name"] == "Eve"

    def test_invalid_update_not_persisted(self, client):
        response = client.post("/rest/players/1", json={"experience": 10_000_001})
        assert response.status_code == 400
        assert client.get("/rest/players/1").json()["experience"] == 100

    def test_update_missing(self, client):
        assert client.post("/rest/players/999999", json={"title": "x"}).status_code == 404


class TestDeleteEndpoint:

    def test_delete(self, client):
        response = client.delete("/rest/players/2")
        assert response.status_code == 200
        assert response.json()["name"] == "bob"
        assert client.get("/rest/players/2").status_code == 404
        assert client.get("/rest/players/count").json() == 4

    def test_delete_missing(self, client):
        assert client.delete("/rest/players/999999").status_code == 404

    def test_delete_bad_id(self, client):
        assert client.delete("/rest/players/0").status_code == 400


class TestHealth:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}


class TestBirthdayWireFormat:
    """Numeric birthdays are always epoch milliseconds."""

    def test_small_millis_on_create_rejected(self, client):
        # 1_000_000_000 ms is 1970-01-12, not 2001-09-09
        response = client.post("/rest/players", json=payload(birthday=1_000_000_000))
        assert response.status_code == 400
        assert client.get("/rest/players/count").json() == 5

    def test_negative_millis_on_create_rejected(self, client):
        response = client.post("/rest/players", json=payload(birthday=-86_400_000))
        assert response.status_code == 400

    def test_small_millis_on_update_rejected(self, client):
        before = client.get("/rest/players/1").json()["birthday"]
        response = client.post("/rest/players/1", json={"birthday": 1_000_000_000})
        assert response.status_code == 400
        assert client.get("/rest/players/1").json()["birthday"] == before

    def test_negative_millis_on_update_rejected(self, client):
        response = client.post("/rest/players/1", json={"birthday": -86_400_000})
        assert response.status_code == 400

    def test_millis_round_trip_on_update(self, client):
        birthday = to_epoch_millis(datetime(2024, 2, 29, 8, 15))
        response = client.post("/rest/players/1", json={"birthday": birthday})
        assert response.status_code == 200
        assert response.json()["birthday"] == birthday


class TestExtremeFilterBounds:

    def test_huge_before_lists_players(self, client):
        response = client.get("/rest/players", params={"before": 9223372036854775807})
        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [1, 2, 3]

    def test_huge_after_counts_nothing(self, client):
        response = client.get("/rest/players/count", params={"after": 9223372036854775807})
        assert response.status_code == 200
        assert response.json() == 0
