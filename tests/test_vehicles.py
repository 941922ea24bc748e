"""Tests for the vehicle variants."""

import dataclasses

import pytest

from console_exercises.vehicles import (
    Car,
    Motorcycle,
    Truck,
    describe,
    kind_of,
    read_truck,
    run_vehicle_demo,
)


def test_variants_carry_only_their_fields():
    assert {f.name for f in dataclasses.fields(Car)} == {"make", "model", "year", "doors", "fuel_type"}
    assert "cargo_capacity" not in {f.name for f in dataclasses.fields(Motorcycle)}
    assert "doors" not in {f.name for f in dataclasses.fields(Truck)}


def test_describe_car():
    lines = dict(describe(Car("Toyota", "Corolla", 2020, 4, "petrol")))
    assert lines == {
        "Make": "Toyota",
        "Model": "Corolla",
        "Year of Manufacture": "2020",
        "Number of Doors": "4",
        "Fuel Type": "petrol",
    }


def test_describe_motorcycle():
    lines = dict(describe(Motorcycle("Honda", "CBR", 2019, 2, "sport")))
    assert lines["Number of Wheels"] == "2"
    assert lines["Motorcycle Type"] == "sport"


def test_describe_truck():
    lines = dict(describe(Truck("Volvo", "FH", 2018, 12.5, "manual")))
    assert lines["Cargo Capacity"] == "12.5 tons"
    assert lines["Transmission Type"] == "manual"
    assert kind_of(Truck("Volvo", "FH", 2018, 12.5, "manual")) == "Truck"


def test_describe_rejects_unknown():
    with pytest.raises(TypeError):
        describe("bicycle")


def test_read_truck_validates_numbers(scanner_for):
    truck = read_truck(scanner_for("Volvo", "FH", "year", "2018", "-3", "lots", "20", "automatic"))
    assert truck == Truck("Volvo", "FH", 2018, 20.0, "automatic")


def test_demo_collects_all_three(scanner_for, console, output):
    scanner = scanner_for(
        "Toyota", "Corolla", "2020", "4", "petrol",
        "Honda", "CBR", "2019", "2", "sport",
        "Volvo", "FH", "2018", "12.5", "manual",
    )
    vehicles = run_vehicle_demo(scanner, console)
    assert [kind_of(v) for v in vehicles] == ["Car", "Motorcycle", "Truck"]

    text = output()
    assert "Vehicle Details:" in text
    assert "Number of Doors: 4" in text
    assert "Motorcycle Type: sport" in text
    assert "Cargo Capacity: 12.5 tons" in text
