"""Unit tests for report building and plain-text formatting."""

import pytest

from vfxquote.config.settings import Settings
from vfxquote.core import PricingEngine, compute_breakdown
from vfxquote.models import Complexity, Driver, Project, Scene, ShotConfiguration, Toggle
from vfxquote.reports import (
    LineKind,
    build_project_report,
    build_shot_report,
    format_money,
    render_text,
    shot_line_items,
)


class TestFormatMoney:
    def test_rounds_and_groups(self) -> None:
        assert format_money(50000) == "50,000 MMK"
        assert format_money(1234567.6) == "1,234,568 MMK"
        assert format_money(-47.4) == "-47 MMK"

    def test_halves_round_away_from_zero(self) -> None:
        assert format_money(902.5, "USD") == "903 USD"
        assert format_money(0.5) == "1 MMK"
        assert format_money(2.5) == "3 MMK"
        assert format_money(-47.5) == "-48 MMK"
        assert format_money(-2.5) == "-3 MMK"


class TestShotReport:
    def test_base_only(self, base_shot: ShotConfiguration) -> None:
        items = shot_line_items(base_shot, compute_breakdown(base_shot))
        assert [item.label for item in items] == ["Base Cost"]
        assert items[0].selection == "10,000/s x 5s"
        assert items[0].amount == pytest.approx(50000)

    def test_lines_follow_selected_levels(self, busy_shot: ShotConfiguration) -> None:
        items = shot_line_items(busy_shot, compute_breakdown(busy_shot))
        assert [item.label for item in items] == [
            "Base Cost",
            "Resolution",
            "Frame Rate",
            "Roto",
            "Simulation (FX)",
        ]
        roto = items[3]
        assert roto.selection == "Easy"
        assert roto.driver is Driver.ROTO
        assert roto.amount == pytest.approx(17500)
        assert items[2].selection == "60 FPS"

    def test_discounts_are_negative_and_total_last(self) -> None:
        shot = ShotConfiguration(
            base_price=100,
            duration=10,
            on_scene_supervision=Toggle.YES,
            allow_showreel_usage=Toggle.YES,
        )
        report = build_shot_report(shot, compute_breakdown(shot), title="Promo")
        (section,) = report.sections
        kinds = [item.kind for item in section.items]
        assert kinds == [
            LineKind.CHARGE,
            LineKind.SUBTOTAL,
            LineKind.DISCOUNT,
            LineKind.DISCOUNT,
            LineKind.TOTAL,
        ]
        discounts = [item.amount for item in section.items if item.kind is LineKind.DISCOUNT]
        assert discounts == [pytest.approx(-50), pytest.approx(-47.5)]
        assert section.items[-1].amount == pytest.approx(902.5)
        assert report.total == pytest.approx(902.5)
        assert report.title == "Promo"


class TestProjectReport:
    def test_one_section_per_scene(self, base_shot: ShotConfiguration) -> None:
        project = Project(
            name="Feature",
            currency="USD",
            scenes=[
                Scene(name="A", data=base_shot),
                Scene(name="B", description="Fire", data=base_shot.with_changes(simulation=Complexity.EASY)),
            ],
        )
        report = build_project_report(project, PricingEngine(Settings()).estimate_project(project))
        assert [s.title for s in report.sections] == ["A", "B"]
        assert report.sections[1].total == pytest.approx(100000)
        assert report.total == pytest.approx(150000)
        assert report.notes == ("2 scene(s)",)
        assert all(s.items[-1].label == "Scene Total" for s in report.sections)

    def test_render_text(self, base_shot: ShotConfiguration) -> None:
        project = Project(name="Feature", scenes=[Scene(name="A", description="Plate", data=base_shot)])
        report = build_project_report(project, PricingEngine(Settings()).estimate_project(project))
        text = render_text(report)
        lines = text.splitlines()
        assert lines[0] == "Feature"
        assert "  Plate" in lines
        assert lines[-2].startswith("GRAND TOTAL")
        assert lines[-2].endswith("50,000 MMK")
        assert lines[-1] == "1 scene(s)"
