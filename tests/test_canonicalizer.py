"""Tests for food name canonicalization."""

import pytest

from food_fusion.domain.vocabulary import FoodVocabulary
from food_fusion.services.canonicalizer import (
    GENERIC_KEY,
    Canonicalizer,
    canonicalize,
    tokenize,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Cherry Tomatoes", "tomato"),
        ("Grilled Chicken Breast", "chicken"),
        ("French Fries", "french fries"),
        ("Cooked White Rice", "rice"),
        ("Fresh Spinach Leaves", "spinach"),
    ],
)
def test_canonicalize_reference_names(raw: str, expected: str) -> None:
    assert canonicalize(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Hot Dogs", "hot dog"),
        ("chicken fried rice", "fried rice"),
        ("crispy french fries", "french fries"),
        ("Fries", "french fries"),
        ("Brussels Sprouts", "brussels sprouts"),
        ("Baked Potato", "baked potato"),
    ],
)
def test_compounds_are_not_decomposed(
    canonicalizer: Canonicalizer, raw: str, expected: str
) -> None:
    assert canonicalizer.canonicalize(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Spaghetti", "pasta"),
        ("Romaine Lettuce", "lettuce"),
        ("Soda", "soft drink"),
        ("mixed greens", "greens"),
        ("Caesar Salad", "salad"),
        ("scallions", "green onion"),
    ],
)
def test_synonyms_consolidate_names(
    canonicalizer: Canonicalizer, raw: str, expected: str
) -> None:
    assert canonicalizer.canonicalize(raw) == expected


@pytest.mark.parametrize("raw", ["food", "Food", "Dish", "", "   ", "!!", "Meal"])
def test_generic_or_empty_names_map_to_generic_key(
    canonicalizer: Canonicalizer, raw: str
) -> None:
    assert canonicalizer.canonicalize(raw) == GENERIC_KEY


@pytest.mark.parametrize(
    "raw", ["Fried", "Fried food", "white", "Grilled Sliced", "Cherries"]
)
def test_modifier_only_names_map_to_generic_key(
    canonicalizer: Canonicalizer, raw: str
) -> None:
    assert canonicalizer.canonicalize(raw) == GENERIC_KEY


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("tomatoes", "tomato"),
        ("berries", "berry"),
        ("pies", "pie"),
        ("glasses", "glass"),
        ("sandwiches", "sandwich"),
        ("asparagus", "asparagus"),
        ("hummus", "hummus"),
        ("peas", "pea"),
        ("eggs", "egg"),
        ("rice", "rice"),
    ],
)
def test_singularize(canonicalizer: Canonicalizer, token: str, expected: str) -> None:
    assert canonicalizer.singularize(token) == expected


def test_tokenize_folds_accents_and_punctuation() -> None:
    assert tokenize("Crème Brûlée") == ["creme", "brulee"]
    assert tokenize("Stir-Fry, Veggies!") == ["stir", "fry", "veggies"]


def test_canonicalize_is_idempotent_for_vocabulary(
    canonicalizer: Canonicalizer, vocabulary: FoodVocabulary
) -> None:
    names = [
        *vocabulary.compounds,
        *vocabulary.synonyms.keys(),
        *vocabulary.synonyms.values(),
        *vocabulary.class_index().keys(),
        *vocabulary.modifiers,
    ]
    for name in names:
        key = canonicalizer.canonicalize(name)
        assert canonicalizer.canonicalize(key) == key, name


@pytest.mark.parametrize(
    "raw",
    [
        "Grilled Atlantic Salmon Fillets",
        "Steamed Broccoli Florets",
        "Chicken Noodle Soup",
        "Pan-Seared Pork Chops",
        "Sweet Potato Fries",
        "Large Glasses of Orange Juice",
        "Boxes",
        "Crème Brûlée",
        "a plate of food",
    ],
)
def test_canonicalize_is_idempotent_for_free_text(
    canonicalizer: Canonicalizer, raw: str
) -> None:
    key = canonicalizer.canonicalize(raw)
    assert canonicalizer.canonicalize(key) == key


def test_canonical_keys_are_classifiable(vocabulary: FoodVocabulary) -> None:
    canonicalizer = Canonicalizer(vocabulary)
    for key in vocabulary.class_index():
        assert canonicalizer.canonicalize(key) == key


def test_canonicalize_is_deterministic(canonicalizer: Canonicalizer) -> None:
    results = {canonicalizer.canonicalize("Grilled Chicken Breast") for _ in range(5)}
    assert results == {"chicken"}


def test_canonicalize_rejects_none(canonicalizer: Canonicalizer) -> None:
    with pytest.raises(TypeError):
        canonicalizer.canonicalize(None)  # type: ignore[arg-type]


def test_custom_vocabulary_drives_stripping() -> None:
    vocabulary = FoodVocabulary(
        modifiers=frozenset({"spicy"}),
        synonyms={"aubergine": "eggplant"},
    )
    canonicalizer = Canonicalizer(vocabulary)

    assert canonicalizer.canonicalize("Spicy Aubergine") == "eggplant"
    assert canonicalizer.canonicalize("grilled tofu") == "grilled tofu"
