from overpass_places.collectors.overpass.queries import QueryTemplate, render_query


def test_by_name_embeds_name():
    query = render_query(QueryTemplate.BY_NAME, "Berlin")
    assert query.startswith("[out:json];")
    assert 'rel["name"="Berlin"]["boundary"="administrative"];' in query
    assert query.endswith("out ids;")


def test_by_coordinates_embeds_point():
    query = render_query(QueryTemplate.BY_COORDINATES, 52.52, 13.405)
    assert "is_in(52.52,13.405) -> .areas;" in query
    assert 'rel(pivot.areas)["place"~"^(city|town|state)$"];' in query
    assert query.endswith("out ids;")


def test_by_relation_id_is_deterministic():
    first = render_query(QueryTemplate.BY_RELATION_ID, 12345)
    second = render_query(QueryTemplate.BY_RELATION_ID, 12345)
    assert first == second
    assert "relation(12345);" in first
    assert "map_to_area->.a;" in first
    assert first.endswith("out center tags;")


def test_by_relation_id_covers_accommodation_vocabulary():
    query = render_query(QueryTemplate.BY_RELATION_ID, 1)
    assert 'node["tourism"="museum"](area.a);' in query
    assert "alpine_hut" in query
    assert "bed_and_breakfast" in query


def test_name_is_not_escaped():
    query = render_query(QueryTemplate.BY_NAME, 'Saint "X"')
    assert '"name"="Saint "X""' in query
