"""
MapPolygon Value Object Tests
=============================

Construction, accessors, the equality/hash contract and the dict form of
the polygon overlay.

Usage:
    pytest test_polygon.py
"""

import math

import numpy as np
import pytest

from gmaps_overlay.schemas import LatLon, MapPolygon


HARBOUR = [LatLon(60.434, 22.223), LatLon(60.4385, 22.231), LatLon(60.435, 22.2405)]


def styled_polygon() -> MapPolygon:
    return MapPolygon(list(HARBOUR), "#3366ff", 0.4, "#003399", 0.9, 2)


def test_defaults():
    """Zero-argument construction yields every default."""
    polygon = MapPolygon()

    assert polygon.coordinates == []
    assert polygon.fill_color == "#ffffff"
    assert polygon.fill_opacity == 1.0
    assert polygon.stroke_color == "#000000"
    assert polygon.stroke_opacity == 1.0
    assert polygon.stroke_weight == 1
    assert polygon.z_index == 0
    assert polygon.geodesic is False


def test_default_instances_do_not_share_coordinates():
    first = MapPolygon()
    second = MapPolygon()
    first.coordinates.append(LatLon(1.0, 2.0))

    assert second.coordinates == []


def test_coordinates_only_construction():
    coords = list(HARBOUR)
    polygon = MapPolygon(coords)

    assert polygon.coordinates is coords
    assert polygon.fill_color == "#ffffff"
    assert polygon.stroke_weight == 1
    assert polygon.z_index == 0
    assert polygon.geodesic is False


def test_full_style_construction_round_trip():
    """Every value passed to the constructor reads back unchanged."""
    polygon = styled_polygon()

    assert polygon.coordinates == HARBOUR
    assert polygon.fill_color == "#3366ff"
    assert polygon.fill_opacity == 0.4
    assert polygon.stroke_color == "#003399"
    assert polygon.stroke_opacity == 0.9
    assert polygon.stroke_weight == 2
    assert polygon.z_index == 0
    assert polygon.geodesic is False


def test_setters_change_only_their_field():
    changes = {
        'coordinates': [LatLon(1.0, 1.0)],
        'fill_color': "#123456",
        'fill_opacity': 0.25,
        'stroke_color': "#654321",
        'stroke_opacity': 0.5,
        'stroke_weight': 7,
        'z_index': 12,
        'geodesic': True,
    }
    for name, value in changes.items():
        polygon = styled_polygon()
        before = polygon.to_dict()
        setattr(polygon, name, value)

        assert getattr(polygon, name) == value
        after = polygon.to_dict()
        changed_keys = {key for key in before if before[key] != after[key]}
        assert len(changed_keys) == 1, name


def test_setters_accept_out_of_range_values():
    polygon = MapPolygon()
    polygon.fill_opacity = -3.5
    polygon.stroke_opacity = 42.0
    polygon.fill_color = ""
    polygon.stroke_color = "not-a-color"
    polygon.stroke_weight = -1

    assert polygon.fill_opacity == -3.5
    assert polygon.stroke_opacity == 42.0
    assert polygon.fill_color == ""
    assert polygon.stroke_color == "not-a-color"
    assert polygon.stroke_weight == -1


def test_z_index_and_geodesic_do_not_affect_equality():
    first = styled_polygon()
    second = styled_polygon()
    second.z_index = 99
    second.geodesic = True

    assert first == second
    assert second == first
    assert hash(first) == hash(second)


def test_each_participating_field_breaks_equality():
    changes = {
        'coordinates': list(HARBOUR) + [LatLon(60.43, 22.233)],
        'fill_color': "#3366fe",
        'fill_opacity': 0.41,
        'stroke_color': "#003398",
        'stroke_opacity': 0.91,
        'stroke_weight': 3,
    }
    for name, value in changes.items():
        other = styled_polygon()
        setattr(other, name, value)

        assert styled_polygon() != other, name
        assert other != styled_polygon(), name


def test_coordinate_order_matters():
    reversed_polygon = styled_polygon()
    reversed_polygon.coordinates = list(reversed(HARBOUR))

    assert styled_polygon() != reversed_polygon


def test_coordinates_compare_across_sequence_types():
    as_tuple = MapPolygon(tuple(HARBOUR))

    assert as_tuple == MapPolygon(list(HARBOUR))
    assert hash(as_tuple) == hash(MapPolygon(list(HARBOUR)))


def test_opacity_uses_bit_equality():
    nan_first = MapPolygon(fill_opacity=math.nan)
    nan_second = MapPolygon(fill_opacity=float("nan"))

    assert nan_first == nan_first
    assert nan_first == nan_second
    assert hash(nan_first) == hash(nan_second)
    assert MapPolygon(stroke_opacity=0.0) != MapPolygon(stroke_opacity=-0.0)


def test_self_equality_and_stable_hash():
    polygon = styled_polygon()

    assert polygon == polygon
    assert hash(polygon) == hash(polygon)
    assert len({polygon, styled_polygon()}) == 1


def test_comparison_with_other_types():
    polygon = MapPolygon()

    assert polygon != "polygon"
    assert polygon != None  # noqa: E711
    assert (polygon == object()) is False


def test_len_counts_coordinates():
    assert len(MapPolygon()) == 0
    assert len(styled_polygon()) == 3


def test_to_dict_uses_wire_names():
    polygon = styled_polygon()
    polygon.z_index = 4
    polygon.geodesic = True

    assert polygon.to_dict() == {
        'coordinates': [
            {'latitude': 60.434, 'longitude': 22.223},
            {'latitude': 60.4385, 'longitude': 22.231},
            {'latitude': 60.435, 'longitude': 22.2405},
        ],
        'fillColor': "#3366ff",
        'fillOpacity': 0.4,
        'strokeColor': "#003399",
        'strokeOpacity': 0.9,
        'strokeWeight': 2,
        'zIndex': 4,
        'geodesic': True,
    }


def test_from_dict_restores_every_field():
    polygon = styled_polygon()
    polygon.z_index = 4
    polygon.geodesic = True

    restored = MapPolygon.from_dict(polygon.to_dict())

    assert restored == polygon
    assert restored.z_index == 4
    assert restored.geodesic is True


def test_from_dict_fills_defaults():
    assert MapPolygon.from_dict({}) == MapPolygon()
    assert MapPolygon.from_dict({'zIndex': 2}).z_index == 2


def test_from_dict_accepts_pair_coordinates():
    polygon = MapPolygon.from_dict({'coordinates': [[1, 2], [3.5, 4.5]]})

    assert polygon.coordinates == [LatLon(1.0, 2.0), LatLon(3.5, 4.5)]


def test_from_dict_rejects_malformed_data():
    bad_payloads = [
        [],
        {'coordinates': "60.4,22.2"},
        {'coordinates': [{'latitude': 1.0}]},
        {'coordinates': [[1.0, 2.0, 3.0]]},
        {'fillOpacity': "opaque"},
        {'strokeWeight': None},
    ]
    for payload in bad_payloads:
        with pytest.raises(ValueError):
            MapPolygon.from_dict(payload)


def test_vertices_array():
    vertices = styled_polygon().vertices()

    assert vertices.shape == (3, 2)
    assert vertices.dtype == np.float64
    np.testing.assert_allclose(vertices[1], [60.4385, 22.231])
    assert MapPolygon().vertices().shape == (0, 2)


def test_from_vertices():
    polygon = MapPolygon.from_vertices(
        np.array([[60.0, 22.0], [60.1, 22.1], [60.2, 22.0]]),
        fill_color="#00ff00",
        z_index=5
    )

    assert polygon.coordinates[2] == LatLon(60.2, 22.0)
    assert polygon.fill_color == "#00ff00"
    assert polygon.z_index == 5
    assert MapPolygon.from_vertices([]) == MapPolygon()


def test_from_vertices_rejects_bad_shape():
    with pytest.raises(ValueError):
        MapPolygon.from_vertices(np.zeros((3, 3)))


def test_unset_coordinates():
    first = MapPolygon(coordinates=None, fill_color="#3366ff")
    second = MapPolygon(coordinates=None, fill_color="#3366ff")

    assert first == second
    assert hash(first) == hash(second)
    assert first != MapPolygon(coordinates=[], fill_color="#3366ff")
    assert first != styled_polygon()
    assert len(first) == 0
    assert first.vertices().shape == (0, 2)

    data = first.to_dict()
    assert data['coordinates'] is None
    assert MapPolygon.from_dict(data) == first
    assert MapPolygon.from_dict(data).coordinates is None


def test_from_dict_geodesic_must_be_boolean():
    for value in ["false", "true", 0, 1, None]:
        with pytest.raises(ValueError):
            MapPolygon.from_dict({'geodesic': value})

    assert MapPolygon.from_dict({'geodesic': False}).geodesic is False


def test_from_dict_integer_fields_reject_fractions():
    bad_payloads = [
        {'strokeWeight': 1.7},
        {'strokeWeight': "2"},
        {'strokeWeight': True},
        {'zIndex': 2.5},
        {'zIndex': True},
        {'zIndex': float('nan')},
    ]
    for payload in bad_payloads:
        with pytest.raises(ValueError):
            MapPolygon.from_dict(payload)

    polygon = MapPolygon.from_dict({'strokeWeight': 2.0, 'zIndex': -3.0})
    assert polygon.stroke_weight == 2
    assert isinstance(polygon.stroke_weight, int)
    assert polygon.z_index == -3
