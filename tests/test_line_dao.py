from subway_api.app.core.db import get_connection
from subway_api.app.dao.line_dao import LineDao
from subway_api.app.dao.section_dao import SectionDao
from subway_api.app.dao.station_dao import StationDao
from subway_api.app.domain import Line, Section


def _section(line_id, up_id, down_id, distance=0):
    return Section(
        line_id=line_id,
        up_station=StationDao.find_by_id(up_id),
        down_station=StationDao.find_by_id(down_id),
        distance=distance,
    )


def test_save_returns_generated_id():
    assert isinstance(LineDao.save(Line("2호선", "red")), int)


def test_find_all():
    LineDao.save(Line("2호선", "green"))
    LineDao.save(Line("3호선", "orange"))

    assert len(LineDao.find_all()) == 2


def test_find_stations_id_by_line_id():
    station_id1 = StationDao.save("강남역")
    station_id2 = StationDao.save("잠실역")
    station_id3 = StationDao.save("신림역")
    line_id = LineDao.save(Line("2호선", "green"))

    SectionDao.save(_section(line_id, station_id1, station_id2))
    SectionDao.save(_section(line_id, station_id2, station_id3))

    assert LineDao.find_stations_id_by_line_id(line_id) == {
        station_id1,
        station_id2,
        station_id3,
    }


def test_find_stations_id_of_line_without_sections_is_empty():
    line_id = LineDao.save(Line("2호선", "green"))
    assert LineDao.find_stations_id_by_line_id(line_id) == set()


def test_find_by_id():
    line_id = LineDao.save(Line("2호선", "green"))

    line = LineDao.find_by_id(line_id)

    assert line.name == "2호선"
    assert line.color == "green"


def test_find_by_id_returns_none_for_unknown_id():
    assert LineDao.find_by_id(10) is None


def test_find_by_name():
    line_id = LineDao.save(Line("2호선", "green"))
    assert LineDao.find_by_name("2호선").id == line_id
    assert LineDao.find_by_name("9호선") is None


def test_update():
    line_id = LineDao.save(Line("2호선", "green"))

    assert LineDao.update(line_id, Line("3호선", "orange")) == 1

    line = LineDao.find_by_id(line_id)
    assert line.name == "3호선"
    assert line.color == "orange"


def test_update_unknown_id_affects_no_rows():
    LineDao.save(Line("2호선", "green"))
    assert LineDao.update(10, Line("3호선", "orange")) == 0


def test_delete():
    LineDao.save(Line("2호선", "green"))
    line_id = LineDao.save(Line("3호선", "orange"))

    assert LineDao.delete(line_id) == 1
    assert len(LineDao.find_all()) == 1


def test_delete_unknown_id_affects_no_rows():
    LineDao.save(Line("2호선", "green"))
    assert LineDao.delete(10) == 0


def test_save_with_section_stores_both_in_one_go():
    up = StationDao.find_by_id(StationDao.save("강남역"))
    down = StationDao.find_by_id(StationDao.save("잠실역"))

    line_id = LineDao.save(Line.with_section("2호선", "green", Section(up, down, distance=5)))

    sections = SectionDao.find_by_line_id(line_id)
    assert len(sections) == 1
    assert sections[0].up_station == up
    assert sections[0].down_station == down
    assert sections[0].distance == 5


def test_sections_are_returned_in_insertion_order():
    ids = [StationDao.save(name) for name in ("강남역", "잠실역", "신림역")]
    line_id = LineDao.save(Line("2호선", "green"))
    SectionDao.save(_section(line_id, ids[1], ids[2]))
    SectionDao.save(_section(line_id, ids[0], ids[1]))

    sections = SectionDao.find_by_line_id(line_id)

    assert [(s.up_station_id, s.down_station_id) for s in sections] == [
        (ids[1], ids[2]),
        (ids[0], ids[1]),
    ]


def test_delete_removes_sections_of_the_line():
    up_id = StationDao.save("강남역")
    down_id = StationDao.save("잠실역")
    line_id = LineDao.save(Line("2호선", "green"))
    SectionDao.save(_section(line_id, up_id, down_id))

    LineDao.delete(line_id)

    conn = get_connection()
    try:
        count = conn.execute(
            "SELECT COUNT(*) AS n FROM section WHERE line_id = ?", (line_id,)
        ).fetchone()["n"]
    finally:
        conn.close()
    assert count == 0
    assert len(StationDao.find_all()) == 2


def test_save_unique_stores_new_name():
    line_id = LineDao.save_unique(Line("2호선", "green"))
    assert LineDao.find_by_id(line_id).name == "2호선"


def test_save_unique_refuses_taken_name():
    LineDao.save(Line("2호선", "green"))

    assert LineDao.save_unique(Line("2호선", "orange")) is None
    assert len(LineDao.find_all()) == 1


def test_ids_beyond_integer_range_match_nothing():
    LineDao.save(Line("2호선", "green"))
    huge = 2**63

    assert LineDao.find_by_id(huge) is None
    assert LineDao.find_stations_id_by_line_id(huge) == set()
    assert LineDao.update(huge, Line("3호선", "orange")) == 0
    assert LineDao.delete(huge) == 0
    assert StationDao.find_by_id(huge) is None
    assert SectionDao.find_by_line_id(-(2**63) - 1) == []
