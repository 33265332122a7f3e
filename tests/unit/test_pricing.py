"""Unit tests for the pricing engine and multiplier tables."""

import pytest

from vfxquote.config.settings import PricingSettings, Settings
from vfxquote.core import (
    BriefScale,
    CostBreakdown,
    FrameRatePolicy,
    PricingEngine,
    compute_breakdown,
    project_total,
)
from vfxquote.core import tables
from vfxquote.errors import PricingError
from vfxquote.models import (
    FLAT_FEE_DRIVERS,
    BriefClarity,
    Complexity,
    Driver,
    Project,
    Resolution,
    Scene,
    ShotConfiguration,
    Toggle,
)

LEVELS = [Complexity.NONE, Complexity.EASY, Complexity.MEDIUM, Complexity.HARD]
SCALED_DRIVERS = [d for d in Driver if d not in FLAT_FEE_DRIVERS and d is not Driver.BRIEF]


class TestEndToEnd:
    def test_base_only(self, base_shot: ShotConfiguration) -> None:
        result = compute_breakdown(base_shot)
        assert isinstance(result, CostBreakdown)
        assert result.base_cost == pytest.approx(50000)
        assert result.resolution_cost == 0
        assert result.fps_cost == 0
        assert all(cost == 0 for cost in result.driver_costs.values())
        assert result.subtotal == pytest.approx(50000)
        assert result.total == pytest.approx(50000)

    def test_with_drivers_and_60fps(self, busy_shot: ShotConfiguration) -> None:
        result = compute_breakdown(busy_shot)
        assert result.resolution_cost == pytest.approx(10000)
        assert result.roto_cost == pytest.approx(17500)
        assert result.simulation_cost == pytest.approx(250000)
        assert result.subtotal_before_fps == pytest.approx(327500)
        assert result.fps_cost == pytest.approx(65500)
        assert result.subtotal == pytest.approx(393000)
        assert result.management_adjustment == 0
        assert result.reel_discount == 0
        assert result.total == pytest.approx(393000)

    def test_resolution_policy_doubles_surcharge(self, busy_shot: ShotConfiguration) -> None:
        result = compute_breakdown(busy_shot, frame_rate_policy=FrameRatePolicy.RESOLUTION)
        assert result.fps_cost == pytest.approx(20000)
        assert result.subtotal == pytest.approx(347500)

    def test_30fps_adds_nothing_under_either_policy(self, base_shot: ShotConfiguration) -> None:
        shot = base_shot.with_changes(resolution=Resolution.K6, roto=Complexity.HARD)
        for policy in FrameRatePolicy:
            assert compute_breakdown(shot, frame_rate_policy=policy).fps_cost == 0


class TestDiscounts:
    def test_sequential_composition(self) -> None:
        shot = ShotConfiguration(
            base_price=100,
            duration=10,
            on_scene_supervision=Toggle.YES,
            allow_showreel_usage=Toggle.YES,
        )
        result = compute_breakdown(shot)
        assert result.subtotal == pytest.approx(1000)
        assert result.management_adjustment == pytest.approx(-50)
        assert result.total_after_management == pytest.approx(950)
        assert result.reel_discount == pytest.approx(-47.5)
        assert result.total == pytest.approx(902.5)
        assert result.has_discounts is True

    def test_management_applies_to_fps_inclusive_subtotal(
        self, busy_shot: ShotConfiguration
    ) -> None:
        result = compute_breakdown(busy_shot.with_changes(on_scene_supervision=Toggle.YES))
        assert result.management_adjustment == pytest.approx(-0.05 * 393000)
        assert result.total == pytest.approx(393000 * 0.95)

    def test_reel_only(self) -> None:
        shot = ShotConfiguration(base_price=100, duration=10, allow_showreel_usage=Toggle.YES)
        result = compute_breakdown(shot)
        assert result.management_adjustment == 0
        assert result.total == pytest.approx(950)


class TestDurationScaling:
    def test_zero_duration_leaves_only_flat_costs(self) -> None:
        shot = ShotConfiguration(
            base_price=100,
            duration=0,
            resolution=Resolution.K6,
            frame_rate="60",
            roto=Complexity.HARD,
            simulation=Complexity.HARD,
            model_3d=Complexity.MEDIUM,
        )
        result = compute_breakdown(shot, frame_rate_policy=FrameRatePolicy.RESOLUTION)
        assert result.base_cost == 0
        assert result.resolution_cost == 0
        assert result.fps_cost == 0
        assert result.roto_cost == 0
        assert result.simulation_cost == 0
        assert result.asset_cost == pytest.approx(900)
        assert result.total == pytest.approx(900)
        assert result.cost_per_second == 0

    def test_doubling_duration_keeps_flat_costs(self) -> None:
        levels = {driver.value: Complexity.MEDIUM for driver in Driver if driver is not Driver.BRIEF}
        short = ShotConfiguration(base_price=250, duration=4, **levels)
        long = short.with_changes(duration=8)
        a, b = compute_breakdown(short), compute_breakdown(long)

        for driver in FLAT_FEE_DRIVERS:
            assert b.driver_costs[driver] == pytest.approx(a.driver_costs[driver])
        for driver in SCALED_DRIVERS:
            assert b.driver_costs[driver] == pytest.approx(2 * a.driver_costs[driver])
        assert b.asset_cost == pytest.approx(a.asset_cost)

    def test_flat_driver_uses_base_price(self) -> None:
        shot = ShotConfiguration(base_price=1000, duration=30, props_environment=Complexity.HARD)
        assert compute_breakdown(shot).asset_cost == pytest.approx(20000)


class TestUnvalidatedInput:
    def test_missing_price_prices_as_zero(self) -> None:
        shot = ShotConfiguration.model_construct(base_price=None)
        result = compute_breakdown(shot)
        assert result.base_cost == 0
        assert result.total == 0

    def test_invalid_duration_keeps_flat_costs(self) -> None:
        shot = ShotConfiguration.model_construct(
            base_price=100, duration="abc", model_3d=Complexity.MEDIUM
        )
        result = compute_breakdown(shot)
        assert result.duration == 0
        assert result.base_cost == 0
        assert result.asset_cost == pytest.approx(900)
        assert result.total == pytest.approx(900)


class TestMonotonicity:
    @pytest.mark.parametrize("driver", [d for d in Driver if d is not Driver.BRIEF])
    def test_non_decreasing_in_level(self, driver: Driver) -> None:
        totals = [
            compute_breakdown(ShotConfiguration(**{driver.value: level})).total
            for level in LEVELS
        ]
        assert totals == sorted(totals)
        assert totals[-1] > totals[0]

    def test_non_decreasing_in_price_and_duration(self, busy_shot: ShotConfiguration) -> None:
        totals = [compute_breakdown(busy_shot.with_changes(base_price=p)).total for p in (0, 1, 50, 5000)]
        assert totals == sorted(totals)
        totals = [compute_breakdown(busy_shot.with_changes(duration=d)).total for d in (0, 0.5, 3, 12)]
        assert totals == sorted(totals)


class TestBriefScales:
    def test_binary_not_clear(self, base_shot: ShotConfiguration) -> None:
        result = compute_breakdown(base_shot.with_changes(brief=BriefClarity.NOT_CLEAR))
        assert result.brief_cost == pytest.approx(20000)

    def test_graded_levels(self, base_shot: ShotConfiguration) -> None:
        expected = {Complexity.NONE: 0, Complexity.EASY: 10000, Complexity.MEDIUM: 20000, Complexity.HARD: 30000}
        for level, cost in expected.items():
            result = compute_breakdown(base_shot.with_changes(brief=level), brief_scale=BriefScale.GRADED)
            assert result.brief_cost == pytest.approx(cost)

    def test_value_from_other_scale_fails(self, base_shot: ShotConfiguration) -> None:
        with pytest.raises(PricingError, match="brief"):
            compute_breakdown(base_shot.with_changes(brief=Complexity.HARD))
        with pytest.raises(PricingError, match="brief"):
            compute_breakdown(base_shot, brief_scale=BriefScale.GRADED)


class TestTables:
    def test_driver_rows(self) -> None:
        assert tables.DRIVERS[Driver.ROTO][Complexity.HARD] == 0.60
        assert tables.DRIVERS[Driver.MATCH_MOVE][Complexity.HARD] == 1.20
        assert tables.DRIVERS[Driver.SIMULATION][Complexity.HARD] == 5.0
        assert tables.DRIVERS[Driver.SCENE_RECONSTRUCTION][Complexity.MEDIUM] == 11.0
        assert tables.DRIVERS[Driver.COMPOSITING_2D][Complexity.HARD] == 0.45

    def test_every_driver_has_a_table(self) -> None:
        for driver in Driver:
            for scale in BriefScale:
                table = tables.driver_table(driver, scale)
                assert all(value >= 0 for value in table.values())

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            tables.RESOLUTION[Resolution.K6] = 1.0  # type: ignore[index]


class TestBreakdownHelpers:
    def test_chart_segments_drop_empty_groups(self, busy_shot: ShotConfiguration) -> None:
        segments = dict(compute_breakdown(busy_shot).chart_segments())
        assert set(segments) == {"Base Cost", "Resolution & FPS", "Prep / Roto", "FX/Sim"}
        assert segments["Resolution & FPS"] == pytest.approx(75500)

    def test_to_dict_is_plain(self, busy_shot: ShotConfiguration) -> None:
        data = compute_breakdown(busy_shot).to_dict()
        assert data["total"] == pytest.approx(393000)
        assert data["driver_costs"]["simulation"] == pytest.approx(250000)

    def test_cost_per_second(self, base_shot: ShotConfiguration) -> None:
        assert compute_breakdown(base_shot).cost_per_second == pytest.approx(10000)


class TestProjectAggregation:
    def test_project_total_is_additive(self, base_shot: ShotConfiguration, busy_shot: ShotConfiguration) -> None:
        scenes = [Scene(name="A", data=base_shot), Scene(name="B", data=busy_shot)]
        assert project_total(scenes) == pytest.approx(443000)
        assert project_total([]) == 0


class TestPricingEngine:
    def test_uses_configured_policy(self, busy_shot: ShotConfiguration) -> None:
        engine = PricingEngine(Settings(pricing=PricingSettings(frame_rate_policy="resolution")))
        assert engine.frame_rate_policy is FrameRatePolicy.RESOLUTION
        assert engine.estimate(busy_shot).fps_cost == pytest.approx(20000)

    def test_estimate_project(self, base_shot: ShotConfiguration, busy_shot: ShotConfiguration) -> None:
        project = Project(
            name="Demo",
            scenes=[Scene(name="A", data=base_shot), Scene(name="B", data=busy_shot)],
        )
        estimate = PricingEngine(Settings()).estimate_project(project)
        assert estimate.scene_count == 2
        assert estimate.total == pytest.approx(443000)
        assert estimate.breakdown_for(project.scenes[1].id).total == pytest.approx(393000)
        assert estimate.breakdown_for("missing") is None
