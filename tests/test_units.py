"""Tests for unit conversion."""

import logging

import pytest

from recomp_tracker.domain.foods import (
    FoodDefinition,
    FoodUnit,
    GramBasis,
    NutrientRates,
    OilBasis,
    PieceBasis,
    UnitSizeBasis,
)
from recomp_tracker.services.units import UnitConverter, infer_oil_unit
from tests.conftest import BREAD, CHICKEN, EGG, OIL, PEANUT_BUTTER, SUGAR


def test_resolve_basis_by_food_shape(converter: UnitConverter) -> None:
    assert converter.resolve_basis(CHICKEN) == GramBasis()
    assert converter.resolve_basis(EGG) == PieceBasis(FoodUnit.PIECE)
    assert converter.resolve_basis(BREAD) == UnitSizeBasis(FoodUnit.SLICE, 32)
    assert converter.resolve_basis(OIL) == OilBasis(FoodUnit.TEASPOON)
    assert converter.resolve_basis(OIL, FoodUnit.TABLESPOON) == OilBasis(
        FoodUnit.TABLESPOON
    )


def test_piece_with_unit_size_uses_grams(converter: UnitConverter) -> None:
    food = FoodDefinition(
        name="Cookie",
        unit=FoodUnit.PIECE,
        unit_size=12,
        per_100g=NutrientRates(calories=500),
        per_piece=NutrientRates(calories=60),
    )
    assert converter.resolve_basis(food) == UnitSizeBasis(FoodUnit.PIECE, 12)
    assert converter.to_stored_quantity(food, 2) == 24
    assert converter.describe(food, 24).nutrients.calories == pytest.approx(120)


def test_to_stored_quantity(converter: UnitConverter) -> None:
    assert converter.to_stored_quantity(CHICKEN, 150) == 150
    assert converter.to_stored_quantity(EGG, 3) == 3
    assert converter.to_stored_quantity(BREAD, 2) == 64
    assert converter.to_stored_quantity(PEANUT_BUTTER, 1.5) == 24


def test_oil_uses_entered_spoon_not_unit_size(converter: UnitConverter) -> None:
    assert converter.to_stored_quantity(OIL, 2) == 10
    assert converter.to_stored_quantity(OIL, 2, FoodUnit.TEASPOON) == 10
    assert converter.to_stored_quantity(OIL, 2, FoodUnit.TABLESPOON) == 30


def test_accepts_only_the_food_unit_except_oil_spoons(
    converter: UnitConverter,
) -> None:
    assert converter.accepts_unit(BREAD, None)
    assert converter.accepts_unit(BREAD, FoodUnit.SLICE)
    assert not converter.accepts_unit(BREAD, FoodUnit.TABLESPOON)
    assert not converter.accepts_unit(CHICKEN, FoodUnit.PIECE)
    assert not converter.accepts_unit(SUGAR, FoodUnit.TABLESPOON)
    assert converter.accepts_unit(OIL, FoodUnit.TABLESPOON)
    assert converter.accepts_unit(OIL, FoodUnit.TEASPOON)
    assert not converter.accepts_unit(OIL, FoodUnit.GRAM)


def test_describe_gram_food(converter: UnitConverter) -> None:
    view = converter.describe(CHICKEN, 200)

    assert view.unit == FoodUnit.GRAM
    assert view.display_units == 200
    assert view.nutrients.calories == pytest.approx(330)
    assert view.nutrients.protein_g == pytest.approx(62)


def test_describe_piece_food_uses_per_piece_rates(converter: UnitConverter) -> None:
    view = converter.describe(EGG, 2)

    assert view.unit == FoodUnit.PIECE
    assert view.display_units == 2
    assert view.nutrients.calories == pytest.approx(144)
    assert view.nutrients.fats_g == pytest.approx(9.6)


@pytest.mark.parametrize(
    ("food", "entered"),
    [
        (BREAD, 3),
        (BREAD, 0.5),
        (PEANUT_BUTTER, 2),
        (PEANUT_BUTTER, 0.25),
        (SUGAR, 2),
        (SUGAR, 3),
    ],
)
def test_unit_size_round_trip(
    converter: UnitConverter, food: FoodDefinition, entered: float
) -> None:
    stored = converter.to_stored_quantity(food, entered)
    view = converter.describe(food, stored)

    assert view.unit == food.unit
    assert view.display_units == pytest.approx(entered)


def test_unit_size_nutrients_use_grams(converter: UnitConverter) -> None:
    view = converter.describe(BREAD, 64)
    # 64 g of 250 kcal/100 g
    assert view.nutrients.calories == pytest.approx(160)


def test_oil_three_teaspoons_reads_back_as_one_tablespoon(
    converter: UnitConverter,
) -> None:
    stored = converter.to_stored_quantity(OIL, 3, FoodUnit.TEASPOON)
    view = converter.describe(OIL, stored)

    assert stored == 15
    assert view.unit == FoodUnit.TABLESPOON
    assert view.display_units == 1.0


def test_oil_teaspoons_not_multiple_of_fifteen(converter: UnitConverter) -> None:
    view = converter.describe(OIL, 10)

    assert view.unit == FoodUnit.TEASPOON
    assert view.display_units == 2.0
    assert view.nutrients.calories == pytest.approx(88.4)


def test_infer_oil_unit() -> None:
    assert infer_oil_unit(0) == FoodUnit.TEASPOON
    assert infer_oil_unit(5) == FoodUnit.TEASPOON
    assert infer_oil_unit(15) == FoodUnit.TABLESPOON
    assert infer_oil_unit(25) == FoodUnit.TEASPOON
    assert infer_oil_unit(45) == FoodUnit.TABLESPOON


def test_oil_name_is_configurable() -> None:
    converter = UnitConverter(oil_food_name="Olive Oil")

    assert converter.resolve_basis(OIL) == UnitSizeBasis(FoodUnit.TEASPOON, 5)


def test_malformed_unit_falls_back_to_grams(
    converter: UnitConverter, caplog: pytest.LogCaptureFixture
) -> None:
    food = FoodDefinition(
        name="Mystery Spread",
        unit=FoodUnit.TABLESPOON,
        per_100g=NutrientRates(calories=300, protein_g=10),
    )

    with caplog.at_level(logging.WARNING, logger="recomp_tracker"):
        stored = converter.to_stored_quantity(food, 40)
        view = converter.describe(food, stored)

    assert converter.resolve_basis(food) == GramBasis(malformed=True)
    assert stored == 40
    assert view.unit == FoodUnit.GRAM
    assert view.display_units == 40
    assert view.nutrients.calories == pytest.approx(120)
    assert "Mystery Spread" in caplog.text


def test_food_without_rates_counts_as_zero(converter: UnitConverter) -> None:
    food = FoodDefinition(name="Water")

    view = converter.describe(food, 500)

    assert view.nutrients.calories == 0
    assert view.nutrients.protein_g == 0
