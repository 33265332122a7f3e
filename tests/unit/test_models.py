"""Unit tests for shot, scene and project models."""

import pytest
from pydantic import ValidationError

from vfxquote.models import (
    DRIVER_INFO,
    FLAT_FEE_DRIVERS,
    BriefClarity,
    Complexity,
    Driver,
    FrameRate,
    Project,
    Resolution,
    Scene,
    ShotConfiguration,
    Toggle,
)


class TestShotConfiguration:
    def test_defaults(self) -> None:
        shot = ShotConfiguration()
        assert shot.base_price == 100
        assert shot.duration == 5
        assert shot.resolution is Resolution.HD_1080
        assert shot.frame_rate is FrameRate.FPS_30
        assert shot.brief is BriefClarity.CLEAR
        assert all(shot.level(d) is Complexity.NONE for d in Driver if d is not Driver.BRIEF)
        assert shot.on_scene_supervision is Toggle.NO
        assert shot.shot_base_cost == 500

    @pytest.mark.parametrize("raw", ["", "abc", None, -5, "-1", float("nan"), float("inf")])
    def test_invalid_numbers_become_zero(self, raw: object) -> None:
        shot = ShotConfiguration(base_price=raw, duration=raw)
        assert shot.base_price == 0.0
        assert shot.duration == 0.0

    def test_numeric_strings_are_parsed(self) -> None:
        shot = ShotConfiguration(base_price="2500", duration="7.5")
        assert shot.shot_base_cost == pytest.approx(18750)

    def test_enum_values_outside_domain_fail(self) -> None:
        with pytest.raises(ValidationError):
            ShotConfiguration(resolution="8K")
        with pytest.raises(ValidationError):
            ShotConfiguration(roto="Extreme")
        with pytest.raises(ValidationError):
            ShotConfiguration(frame_rate=24)
        with pytest.raises(ValidationError):
            ShotConfiguration(brief="Vague")

    def test_level_aliases(self) -> None:
        shot = ShotConfiguration(roto="No", keying="Hard", cleanup="Medium")
        assert shot.roto is Complexity.NONE
        assert shot.keying is Complexity.HARD
        assert shot.cleanup is Complexity.MEDIUM

    @pytest.mark.parametrize("level", ["hard", "HARD", "none", "no", " No"])
    def test_level_names_are_case_sensitive(self, level: str) -> None:
        with pytest.raises(ValidationError):
            ShotConfiguration(keying=level)

    def test_brief_accepts_either_scale(self) -> None:
        assert ShotConfiguration(brief="Not Clear").brief is BriefClarity.NOT_CLEAR
        assert ShotConfiguration(brief="Easy").brief is Complexity.EASY

    def test_frame_rate_and_toggle_coercion(self) -> None:
        shot = ShotConfiguration(frame_rate=60, on_scene_supervision=True, allow_showreel_usage="Yes")
        assert shot.frame_rate is FrameRate.FPS_60
        assert shot.on_scene_supervision is Toggle.YES
        assert shot.allow_showreel_usage is Toggle.YES

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ShotConfiguration(lighting="Hard")

    def test_immutable_with_changes(self) -> None:
        shot = ShotConfiguration()
        with pytest.raises(ValidationError):
            shot.duration = 10  # type: ignore[misc]
        changed = shot.with_changes(duration=10, simulation=Complexity.HARD)
        assert changed.duration == 10
        assert changed.simulation is Complexity.HARD
        assert shot.duration == 5

    def test_json_roundtrip(self) -> None:
        shot = ShotConfiguration(base_price=1234.5, resolution="6K", brief="Hard", urgent="Easy")
        restored = ShotConfiguration.model_validate_json(shot.model_dump_json())
        assert restored == shot


class TestDriverCatalogue:
    def test_every_driver_is_a_shot_field(self) -> None:
        for driver in Driver:
            assert driver.value in ShotConfiguration.model_fields
            assert driver in DRIVER_INFO

    def test_flat_fee_drivers(self) -> None:
        assert FLAT_FEE_DRIVERS == {
            Driver.MODEL_3D,
            Driver.RIGGING,
            Driver.SCENE_RECONSTRUCTION,
            Driver.PROPS_ENVIRONMENT,
        }


class TestProject:
    def test_scene_ids_are_unique(self) -> None:
        a, b = Scene(name="A"), Scene(name="B")
        assert a.id != b.id
        assert a.data == ShotConfiguration()

    def test_scene_name_required(self) -> None:
        with pytest.raises(ValidationError):
            Scene(name="")

    def test_lookup(self) -> None:
        scenes = [Scene(name="A"), Scene(name="B")]
        project = Project(scenes=scenes)
        assert project.get_scene(scenes[1].id) is scenes[1]
        assert project.index_of(scenes[1].id) == 1
        assert project.get_scene("nope") is None
        assert project.index_of("nope") is None
