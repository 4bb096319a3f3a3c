import json

import pytest

from railgraph.adapters.stations import JsonStationCatalog
from railgraph.domain.errors import DataUnavailableError
from railgraph.domain.models import Station


@pytest.fixture
def catalog_path(tmp_path):
    path = tmp_path / "stations.json"
    path.write_text(
        json.dumps(
            [
                {"shortName": "MX", "longName": "Montreux"},
                {"shortName": "CGE", "longName": "Montreux-Collège"},
                {"shortName": "", "longName": "Nowhere"},
                {"shortName": "XX"},
            ]
        ),
        encoding="utf-8",
    )
    return path


def test_list_stations_in_file_order(catalog_path):
    catalog = JsonStationCatalog(catalog_path)

    assert catalog.list_stations() == [
        Station("MX", "Montreux"),
        Station("CGE", "Montreux-Collège"),
        Station("XX", "XX"),
    ]


def test_get_station(catalog_path):
    catalog = JsonStationCatalog(catalog_path)

    assert catalog.get_station("CGE") == Station("CGE", "Montreux-Collège")
    assert catalog.get_station("UNKNOWN") is None


def test_stations_are_cached_until_cleared(catalog_path):
    catalog = JsonStationCatalog(catalog_path)
    catalog.list_stations()

    catalog_path.write_text(json.dumps([{"shortName": "ZW", "longName": "Zweisimmen"}]))
    assert catalog.get_station("ZW") is None

    catalog.clear_cache()
    assert catalog.list_stations() == [Station("ZW", "Zweisimmen")]


def test_missing_file_is_data_unavailable(tmp_path):
    catalog = JsonStationCatalog(tmp_path / "missing.json")

    with pytest.raises(DataUnavailableError):
        catalog.list_stations()


def test_wrong_shape_is_data_unavailable(tmp_path):
    path = tmp_path / "stations.json"
    path.write_text(json.dumps({"MX": "Montreux"}), encoding="utf-8")

    with pytest.raises(DataUnavailableError):
        JsonStationCatalog(path).list_stations()


def test_packaged_catalog_includes_unconnected_station():
    catalog = JsonStationCatalog()

    assert catalog.get_station("LENK") == Station("LENK", "Lenk im Simmental")
    assert len(catalog.list_stations()) == 9
