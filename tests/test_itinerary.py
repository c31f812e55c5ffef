"""
Tests for itinerary rendering.
"""

import pytest

from contract_route_toolkit.models import TravelStyle
from contract_route_toolkit.routing import build_route_summary, render_itinerary
from contract_route_toolkit.routing.itinerary import day_slots


@pytest.fixture
def plan(planner):
    """Paris then Rome, three days each."""
    return planner.plan_route(["Paris", "Rome"], TravelStyle.BUDGET, 6)


class TestRouteSummary:
    """Tests for the headline summary."""

    def test_summary_fields(self, plan):
        summary = build_route_summary(plan)

        assert summary.total_destinations == 2
        assert summary.total_distance == plan.total_distance
        assert summary.total_duration == 6
        assert summary.estimated_budget == "¥3,800 - ¥4,940"

    def test_summary_aliases(self, plan):
        data = build_route_summary(plan).model_dump(by_alias=True)
        assert set(data) == {"totalDestinations", "totalDistance", "totalDuration", "estimatedBudget"}


class TestDaySlots:
    """Tests for morning and afternoon selection."""

    def test_walks_the_attraction_list(self, plan):
        paris = plan.route[0]
        assert day_slots(paris, 0) == ("埃菲尔铁塔", "卢浮宫")
        assert day_slots(paris, 1) == ("圣母院", "香榭丽舍大街")

    def test_falls_back_when_list_runs_out(self, plan):
        paris = plan.route[0]
        # five attractions: day 3 has a morning slot but no afternoon one
        assert day_slots(paris, 2) == ("凯旋门", "卢浮宫")
        assert day_slots(paris, 3) == ("埃菲尔铁塔", "卢浮宫")

    def test_single_attraction(self, plan):
        stop = plan.route[0].model_copy(update={"attractions": ["only"]})
        assert day_slots(stop, 2) == ("only", "only")


class TestRenderItinerary:
    """Tests for the full text itinerary."""

    def test_overview(self, plan):
        text = render_itinerary(plan)

        assert text.startswith("🗺️ 旅游路线总览")
        assert "📍 目的地：Paris → Rome" in text
        assert "🕐 总行程：6天" in text
        assert f"🚗 总距离：{plan.total_distance}公里" in text
        assert "💰 预算范围：¥3,800 - ¥4,940" in text

    def test_stops(self, plan):
        text = render_itinerary(plan)

        assert "📍 第1站：Paris" in text
        assert "📍 第2站：Rome" in text
        assert "• 位置：France, Île-de-France" in text
        assert "• 建议停留：3天" in text
        assert text.count("第1天：") == 2
        assert text.count("第3天：") == 2
        assert "上午：埃菲尔铁塔" in text
        assert "晚上：当地特色美食体验" in text

    def test_next_stop_hint(self, plan):
        text = render_itinerary(plan)

        assert text.count("🚗 前往下一站") == 1
        assert "• 目的地：Rome" in text
        assert "• 交通方式：经济舱航班" in text

    def test_single_day_stops_skip_schedule(self, planner):
        plan = planner.plan_route(["Paris", "Rome", "London"], TravelStyle.COMFORT, 3)
        text = render_itinerary(plan)

        assert "📅 推荐行程安排" not in text
        assert text.count("🚗 前往下一站") == 2

    def test_tips(self, plan):
        text = render_itinerary(plan)

        assert "💡 旅行贴士" in text
        for tip in plan.tips:
            assert f"• {tip}" in text
