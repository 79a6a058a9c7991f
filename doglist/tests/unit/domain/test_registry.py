from __future__ import annotations

import pytest

from doglist.domain.errors import DuplicateNameError, EmptyNameError
from doglist.domain.registry import DogRegistry


def _names(dogs) -> list[str]:
    return [dog.name for dog in dogs]


def test_new_registry_is_empty() -> None:
    registry = DogRegistry()

    assert registry.total_count() == 0
    assert registry.favorite_count() == 0
    assert registry.visible_list() == []
    assert registry.search_query == ""


@pytest.mark.parametrize(
    ("first", "second"),
    [("Rex", "rex"), ("fido", "FIDO"), ("Max", "mAX")],
)
def test_add_rejects_names_differing_only_in_case(first: str, second: str) -> None:
    registry = DogRegistry()
    registry.add(first)

    with pytest.raises(DuplicateNameError) as excinfo:
        registry.add(second)

    assert excinfo.value.name == second
    assert str(excinfo.value) == "A dog with this name already exists."
    assert registry.total_count() == 1
    assert _names(registry.visible_list()) == [first]


def test_failed_add_leaves_favorites_untouched() -> None:
    registry = DogRegistry()
    registry.add("Rex")
    registry.toggle_favorite("Rex")
    before = registry.snapshot()

    with pytest.raises(DuplicateNameError):
        registry.add("REX")

    assert registry.snapshot() == before


@pytest.mark.parametrize("name", ["", "   ", None])
def test_add_rejects_blank_names(name) -> None:
    registry = DogRegistry()

    with pytest.raises(EmptyNameError):
        registry.add(name)

    assert registry.total_count() == 0


def test_surrounding_whitespace_is_part_of_the_name() -> None:
    registry = DogRegistry()
    registry.add("Rex")

    snapshot = registry.add("Rex ")

    assert snapshot.names() == ("Rex", "Rex ")
    with pytest.raises(DuplicateNameError):
        registry.add("rex ")


def test_added_name_is_the_key_for_toggle_and_remove() -> None:
    registry = DogRegistry()
    registry.add(" Rex")

    registry.toggle_favorite(" Rex")
    assert registry.favorite_count() == 1

    registry.remove(" Rex")
    assert registry.total_count() == 0
    assert registry.favorite_count() == 0


def test_add_returns_snapshot_with_new_non_favorite_dog() -> None:
    registry = DogRegistry()

    snapshot = registry.add("Fido")

    assert snapshot.total_count == 1
    assert snapshot.favorite_count == 0
    assert snapshot.dogs[0].is_favorite is False


def test_toggle_favorite_flips_back_and_forth() -> None:
    registry = DogRegistry()
    registry.add("Rex")

    registry.toggle_favorite("Rex")
    assert registry.favorite_count() == 1

    registry.toggle_favorite("Rex")
    assert registry.favorite_count() == 0


def test_toggle_favorite_uses_exact_name() -> None:
    registry = DogRegistry()
    registry.add("Rex")

    snapshot = registry.toggle_favorite("rex")

    assert snapshot.favorite_count == 0


def test_toggle_favorite_missing_dog_is_noop() -> None:
    registry = DogRegistry()
    registry.add("Rex")

    snapshot = registry.toggle_favorite("Fido")

    assert snapshot.total_count == 1
    assert snapshot.favorite_count == 0


def test_remove_missing_dog_is_noop() -> None:
    registry = DogRegistry()
    registry.add("Rex")

    snapshot = registry.remove("Fido")

    assert snapshot.total_count == 1
    assert registry.total_count() == 1


def test_remove_recomputes_favorite_count() -> None:
    registry = DogRegistry()
    registry.add("Rex")
    registry.add("Fido")
    registry.toggle_favorite("Rex")

    snapshot = registry.remove("Rex")

    assert snapshot.total_count == 1
    assert snapshot.favorite_count == 0
    assert registry.favorite_count() == 0


def test_removed_name_can_be_added_again() -> None:
    registry = DogRegistry()
    registry.add("Rex")
    registry.remove("Rex")

    snapshot = registry.add("REX")

    assert snapshot.names() == ("REX",)


def test_search_is_case_insensitive_substring() -> None:
    registry = DogRegistry()
    registry.add("Rex")
    registry.add("Fido")

    registry.set_search_query("re")

    assert _names(registry.visible_list()) == ["Rex"]
    assert registry.total_count() == 2


def test_search_query_does_not_change_counts() -> None:
    registry = DogRegistry()
    registry.add("Rex")
    registry.add("Fido")
    registry.toggle_favorite("Fido")

    registry.set_search_query("zzz")

    assert registry.visible_list() == []
    assert registry.total_count() == 2
    assert registry.favorite_count() == 1


def test_empty_or_none_query_matches_all() -> None:
    registry = DogRegistry()
    registry.add("Rex")
    registry.add("Fido")
    registry.set_search_query("x")

    registry.set_search_query(None)

    assert registry.search_query == ""
    assert _names(registry.visible_list()) == ["Rex", "Fido"]


def test_visible_list_places_favorites_first() -> None:
    registry = DogRegistry()
    for name in ("A", "B", "C"):
        registry.add(name)
    registry.toggle_favorite("B")
    registry.toggle_favorite("C")

    names = _names(registry.visible_list())

    assert set(names[:2]) == {"B", "C"}
    assert names[2] == "A"


def test_visible_list_keeps_insertion_order_within_groups() -> None:
    registry = DogRegistry()
    for name in ("Alpha", "Bravo", "Charlie", "Delta"):
        registry.add(name)
    registry.toggle_favorite("Delta")
    registry.toggle_favorite("Bravo")

    assert _names(registry.visible_list()) == ["Bravo", "Delta", "Alpha", "Charlie"]


def test_derivations_are_idempotent() -> None:
    registry = DogRegistry()
    registry.add("Rex")
    registry.add("Fido")
    registry.toggle_favorite("Fido")
    registry.set_search_query("o")

    assert registry.visible_list() == registry.visible_list()
    assert registry.favorite_count() == registry.favorite_count() == 1
    assert registry.snapshot() == registry.snapshot()


def test_snapshot_is_detached_from_later_mutations() -> None:
    registry = DogRegistry()
    snapshot = registry.add("Rex")

    registry.toggle_favorite("Rex")
    registry.add("Fido")

    assert snapshot.total_count == 1
    assert snapshot.favorite_count == 0


def test_lookup_helpers_ignore_case() -> None:
    registry = DogRegistry()
    registry.add("Rex")

    assert "rex" in registry
    assert "Fido" not in registry
    assert 42 not in registry
    assert registry.get("REX").name == "Rex"
    assert len(registry) == 1
    assert [dog.name for dog in registry] == ["Rex"]


def test_end_to_end_scenario() -> None:
    registry = DogRegistry()

    registry.add("Fido")
    assert registry.total_count() == 1
    assert registry.favorite_count() == 0

    with pytest.raises(DuplicateNameError):
        registry.add("fido")

    registry.toggle_favorite("Fido")
    assert registry.favorite_count() == 1

    registry.remove("Fido")
    assert registry.total_count() == 0
    assert registry.favorite_count() == 0


def test_case_matching_does_not_fold_special_letters() -> None:
    registry = DogRegistry()
    registry.add("Straße")

    snapshot = registry.add("STRASSE")
    registry.set_search_query("ss")

    assert snapshot.total_count == 2
    assert [dog.name for dog in registry.visible_list()] == ["STRASSE"]
