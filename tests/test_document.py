from overpass_places.collectors.overpass import document


def test_parse_document_empty_and_malformed():
    assert document.parse_document("") is None
    assert document.parse_document(None) is None
    assert document.parse_document("{not json") is None


def test_parse_document_object():
    assert document.parse_document('{"elements": []}') == {"elements": []}


def test_has_ignores_null_and_non_objects():
    assert document.has({"id": 1}, "id")
    assert not document.has({"id": None}, "id")
    assert not document.has([1, 2], "id")
    assert not document.has("text", "id")


def test_typed_reads_return_none_on_mismatch():
    value = {"s": "x", "i": 7, "f": 1.5, "b": True, "big": 2 ** 63}
    assert document.get_string(value, "s") == "x"
    assert document.get_string(value, "i") is None
    assert document.get_int64(value, "i") == 7
    assert document.get_int64(value, "f") is None
    assert document.get_int64(value, "b") is None
    assert document.get_int64(value, "big") is None
    assert document.get_double(value, "i") == 7.0
    assert document.get_double(value, "s") is None
    assert document.get_double(value, "b") is None
    assert document.get_double(value, "missing") is None


def test_iter_array():
    assert list(document.iter_array({"a": [1, 2]}, "a")) == [1, 2]
    assert list(document.iter_array({"a": {"x": 1}}, "a")) == []
    assert list(document.iter_array(None, "a")) == []


def test_parse_document_rejects_non_standard_constants():
    assert document.parse_document('{"lat": NaN}') is None
    assert document.parse_document('{"lat": Infinity}') is None
    assert document.parse_document('{"lat": -Infinity}') is None


def test_get_double_rejects_non_finite():
    assert document.get_double({"lat": float("inf")}, "lat") is None
    assert document.get_double({"lat": float("nan")}, "lat") is None
    assert document.get_double(document.parse_document('{"lat": 1e999}'), "lat") is None
