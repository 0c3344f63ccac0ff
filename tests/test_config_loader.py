"""Layered configuration: the shipped defaults, the read cache, profile names."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest
import rtoml

from syntax_tour.adapters.config.loader import (
    clear_config_cache,
    get_config,
    get_default_config_path,
    validate_profile,
)


@pytest.mark.os_agnostic
def test_shipped_defaults_describe_dinner_and_lebron() -> None:
    data = rtoml.load(get_default_config_path())

    assert data["menu"] == {"dinner_food": "chicken salad"}
    assert data["player"]["user_name"] == "Lebron James"
    assert data["player"]["address"] == {"city": "Los Angeles"}


@pytest.mark.os_agnostic
class TestReadCache:
    """One read per profile until the cache is cleared."""

    def test_a_second_call_is_served_from_the_cache(self, clear_config_cache: None) -> None:
        assert get_config() is get_config()

    @pytest.mark.usefixtures("clear_config_cache")
    def test_clearing_forces_a_new_read_with_the_same_content(self) -> None:
        before = get_config()
        clear_config_cache()
        after = get_config()

        assert after is not before
        assert after.as_dict() == before.as_dict()

    def test_threads_all_see_the_same_dinner(self, clear_config_cache: None) -> None:
        with ThreadPoolExecutor(max_workers=4) as pool:
            dinners = {pool.submit(get_config).result().get("menu.dinner_food") for _ in range(8)}

        assert dinners == {"chicken salad"}


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["../etc", "foo/bar", "", "-weekend", "CON", "a" * 65])
def test_unsafe_profile_names_never_reach_the_file_system(profile: str, clear_config_cache: None) -> None:
    with pytest.raises(ValueError):
        get_config(profile=profile)


@pytest.mark.os_agnostic
def test_profile_length_limit_is_adjustable() -> None:
    validate_profile("weekend", max_length=7)

    with pytest.raises(ValueError):
        validate_profile("weekends", max_length=7)
