"""
HTTP contract of the line endpoints.

Not-found answers differ by verb: GET gives 400 while PUT and DELETE
give 204.  Clients depend on this, so the tests pin it down.
"""


def _create(client, name, color, **extra):
    return client.post("/lines", json={"name": name, "color": color, **extra})


def _line_id(response):
    return int(response.headers["Location"].split("/")[2])


def test_create_line(client):
    response = _create(client, "3호선", "bg-orange-600")

    assert response.status_code == 201
    assert response.headers["Location"].strip()
    assert response.json()["name"] == "3호선"


def test_create_line_with_duplicate_name(client):
    _create(client, "4호선", "bg-blue-600")

    response = _create(client, "4호선", "bg-blue-600")

    assert response.status_code == 400


def test_create_line_with_blank_name_is_rejected(client):
    response = _create(client, "  ", "bg-blue-600")
    assert response.status_code == 422


def test_create_line_with_only_one_station_is_rejected(client):
    response = _create(client, "2호선", "bg-green-600", upStationId=1)
    assert response.status_code == 422


def test_create_line_with_section(client):
    up = client.post("/stations", json={"name": "강남역"}).json()["id"]
    down = client.post("/stations", json={"name": "역삼역"}).json()["id"]

    response = _create(
        client, "2호선", "bg-green-600", upStationId=up, downStationId=down, distance=10
    )

    assert response.status_code == 201
    found = client.get(response.headers["Location"]).json()
    assert [s["name"] for s in found["stations"]] == ["강남역", "역삼역"]


def test_create_line_with_unknown_station(client):
    response = _create(client, "2호선", "bg-green-600", upStationId=1, downStationId=2)
    assert response.status_code == 400


def test_find_line(client):
    created = _create(client, "1호선", "bg-red-600")

    response = client.get(created.headers["Location"])

    assert response.status_code == 200
    assert response.json() == {
        "id": _line_id(created),
        "name": "1호선",
        "color": "bg-red-600",
        "stations": [],
    }


def test_find_unknown_line_is_bad_request(client):
    response = client.get("/lines/0")
    assert response.status_code == 400


def test_get_lines(client):
    created1 = _create(client, "1호선", "bg-blue-600")
    created2 = _create(client, "2호선", "bg-green-600")

    response = client.get("/lines")

    assert response.status_code == 200
    result_ids = [line["id"] for line in response.json()]
    assert {_line_id(created1), _line_id(created2)} <= set(result_ids)


def test_delete_line(client):
    created = _create(client, "1호선", "bg-blue-600")

    response = client.delete(created.headers["Location"])

    assert response.status_code == 200
    assert client.get(created.headers["Location"]).status_code == 400


def test_delete_unknown_line_is_no_content(client):
    response = client.delete("/lines/1")
    assert response.status_code == 204


def test_update_line(client):
    created = _create(client, "1호선", "bg-red-600")

    response = client.put(
        created.headers["Location"], json={"name": "2호선", "color": "bg-green-600"}
    )

    assert response.status_code == 200
    found = client.get(created.headers["Location"]).json()
    assert (found["name"], found["color"]) == ("2호선", "bg-green-600")


def test_update_unknown_line_is_no_content(client):
    response = client.put("/lines/1", json={"name": "1호선", "color": "bg-red-600"})
    assert response.status_code == 204


def test_create_same_line_twice(client):
    first = _create(client, "3호선", "bg-orange-600")
    second = _create(client, "3호선", "bg-orange-600")

    assert first.status_code == 201
    assert first.headers["Location"].strip()
    assert second.status_code == 400


def test_create_line_with_distance_but_no_stations_is_rejected(client):
    response = _create(client, "2호선", "bg-green-600", distance=10)
    assert response.status_code == 422


HUGE_ID = 2**63


def test_find_line_with_id_beyond_integer_range_is_bad_request(client):
    assert client.get(f"/lines/{HUGE_ID}").status_code == 400


def test_update_line_with_id_beyond_integer_range_is_no_content(client):
    response = client.put(f"/lines/{HUGE_ID}", json={"name": "1호선", "color": "bg-red-600"})
    assert response.status_code == 204


def test_delete_line_with_id_beyond_integer_range_is_no_content(client):
    assert client.delete(f"/lines/{HUGE_ID}").status_code == 204


def test_create_line_with_station_id_beyond_integer_range(client):
    down = client.post("/stations", json={"name": "역삼역"}).json()["id"]

    response = _create(
        client, "2호선", "bg-green-600", upStationId=HUGE_ID, downStationId=down
    )

    assert response.status_code == 400
    assert client.get("/lines").json() == []
