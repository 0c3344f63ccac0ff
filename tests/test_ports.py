"""In-memory adapters and the two wirings honour the same port contracts."""

from __future__ import annotations

from collections.abc import Callable

import orjson
import pytest
from lib_layered_config import Config

from syntax_tour.adapters.memory import InMemoryConfig, RecordingLogInit, display_config_in_memory
from syntax_tour.composition import AppServices, build_production, build_testing
from syntax_tour.domain.enums import OutputFormat
from syntax_tour.domain.errors import ConfigurationError
from syntax_tour.domain.player import DEFAULT_PLAYER


@pytest.mark.os_agnostic
class TestInMemoryConfig:
    def test_serves_its_data_for_any_profile(self) -> None:
        source = InMemoryConfig({"menu": {"dinner_food": "soup"}})

        assert source().get("menu.dinner_food") == "soup"
        assert source(profile="weekend").get("menu.dinner_food") == "soup"
        assert source.requested_profiles == [None, "weekend"]

    def test_refuses_unsafe_profiles_like_the_file_loader(self) -> None:
        source = InMemoryConfig()

        with pytest.raises(ValueError):
            source(profile="../etc")
        assert source.requested_profiles == []


@pytest.mark.os_agnostic
class TestDisplayConfigInMemory:
    def test_json_is_sorted_and_limited_to_the_section(self, capsys: pytest.CaptureFixture[str]) -> None:
        config = Config({"menu": {"dinner_food": "soup"}, "player": {"club": "Storm"}}, {})

        display_config_in_memory(config, output_format=OutputFormat.JSON, section="player")

        assert orjson.loads(capsys.readouterr().out) == {"player": {"club": "Storm"}}

    def test_human_lists_key_value_lines(self, capsys: pytest.CaptureFixture[str]) -> None:
        display_config_in_memory(Config({"player": {"address": {"city": "Akron"}}}, {}))

        assert capsys.readouterr().out == '[player]\naddress = {"city":"Akron"}\n'

    def test_unknown_section_raises_value_error(self) -> None:
        with pytest.raises(ValueError, match="'dessert' not found"):
            display_config_in_memory(Config({}, {}), section="dessert")


@pytest.mark.os_agnostic
def test_recording_log_init_keeps_each_config() -> None:
    init = RecordingLogInit()
    config = Config({"lib_log_rich": {"console_level": "debug"}}, {})

    init(config)

    assert init.configs == [config]


@pytest.mark.os_agnostic
@pytest.mark.parametrize("build", [build_production, build_testing])
def test_both_wirings_fill_every_port(build: Callable[[], AppServices]) -> None:
    services = build()

    assert isinstance(services, AppServices)
    for name in AppServices.__dataclass_fields__:
        assert callable(getattr(services, name))


@pytest.mark.os_agnostic
class TestBuildTesting:
    """Sections are loaded by the production loaders, so failures look the same."""

    def test_empty_configuration_gives_the_demo_defaults(self) -> None:
        services = build_testing()
        data = services.get_config().as_dict()

        assert services.load_menu_config(data).dinner_food == "chicken salad"
        assert services.load_player_record(data) is DEFAULT_PLAYER

    def test_list_as_dinner_food_is_a_configuration_error(self) -> None:
        services = build_testing()

        with pytest.raises(ConfigurationError, match=r"\[menu\]"):
            services.load_menu_config({"menu": {"dinner_food": ["x"]}})

    def test_player_that_is_not_a_table_is_a_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            build_testing().load_player_record({"player": ["Lebron James"]})
