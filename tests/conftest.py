import pytest

from bike_dashboard.records import parse_records

SCENARIO_TEXT = "city,brand\nDelhi,Hero\nMumbai,Honda\nDelhi,Honda"

LISTINGS_TEXT = """bike_name,price,city,kms_driven,owner,age,power,brand
Hero Splendor Plus 100cc,45000,Delhi,12645,First Owner,3,100,Hero
Honda CB Shine 125cc,39000,Mumbai,18000,First Owner,5,125,Honda
Honda CB Hornet 160R,85000,Delhi,8200,Second Owner,3,160,Honda
Royal Enfield Classic 350cc,119900,Pune,11000,First Owner,4,350,Royal Enfield
Bajaj Pulsar 150cc,not listed,Delhi,31000,First Owner,6,150,Bajaj
"""


@pytest.fixture
def scenario():
    return parse_records(SCENARIO_TEXT).records


@pytest.fixture
def listings():
    return parse_records(LISTINGS_TEXT).records


@pytest.fixture
def listings_file(tmp_path):
    path = tmp_path / "bikes.csv"
    path.write_text(LISTINGS_TEXT, encoding="utf-8")
    return path
