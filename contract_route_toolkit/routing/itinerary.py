"""
Itinerary rendering for route plans.

Turns a RoutePlan into a day-by-day text itinerary and a headline
summary. Day slots are filled from the stop's attraction list.
"""

from contract_route_toolkit.models.schemas import PlaceStop, RoutePlan, RouteSummary


RULE = "═" * 27
STOP_RULE = "━" * 23

EVENING_ACTIVITY = "当地特色美食体验"


def build_route_summary(plan: RoutePlan) -> RouteSummary:
    """Headline numbers of a route plan."""
    return RouteSummary(
        total_destinations=len(plan.route),
        total_distance=plan.total_distance,
        total_duration=plan.total_duration,
        estimated_budget=plan.estimated_budget,
    )


def day_slots(stop: PlaceStop, day_index: int) -> tuple[str, str]:
    """
    Morning and afternoon attractions for one day at a stop.

    Day i visits attractions 2i and 2i+1; once the list runs out the
    first (and second) attractions are repeated.

    Args:
        stop: Stop with a non-empty attraction list
        day_index: Zero-based day at this stop

    Returns:
        Tuple of (morning, afternoon)
    """
    attractions = stop.attractions

    def pick(index: int, *fallbacks: int) -> str:
        for i in (index, *fallbacks):
            if i < len(attractions) and attractions[i]:
                return attractions[i]
        return attractions[0]

    return pick(2 * day_index, 0), pick(2 * day_index + 1, 1, 0)


def _format_stop(plan: RoutePlan, index: int) -> list[str]:
    stop = plan.route[index]
    location = stop.country + (f", {stop.region}" if stop.region else "")

    lines = [
        f"📍 第{stop.order}站：{stop.name}",
        STOP_RULE,
        "",
        "🏛️ 目的地信息",
        f"• 位置：{location}",
        f"• 建议停留：{stop.recommended_days}天",
        f"• 交通方式：{stop.transportation}",
        f"• 预估花费：{stop.estimated_cost}",
        "",
        "🎯 必游景点",
    ]
    lines.extend(f"• {attraction}" for attraction in stop.attractions)
    lines.extend(["", "📝 目的地介绍", stop.description, ""])

    if stop.recommended_days > 1 and stop.attractions:
        lines.append("📅 推荐行程安排")
        for day in range(stop.recommended_days):
            morning, afternoon = day_slots(stop, day)
            lines.extend([
                f"第{day + 1}天：",
                f"上午：{morning}",
                f"下午：{afternoon}",
                f"晚上：{EVENING_ACTIVITY}",
            ])
        lines.append("")

    if index < len(plan.route) - 1:
        following = plan.route[index + 1]
        lines.extend([
            "🚗 前往下一站",
            f"• 目的地：{following.name}",
            f"• 交通方式：{following.transportation}",
            "• 预计用时：根据实际交通工具安排",
            "",
        ])

    return lines


def render_itinerary(plan: RoutePlan) -> str:
    """
    Render a day-by-day text itinerary.

    Args:
        plan: Route plan

    Returns:
        Multi-line itinerary text
    """
    lines = [
        "🗺️ 旅游路线总览",
        RULE,
        "",
        f"📍 目的地：{' → '.join(stop.name for stop in plan.route)}",
        f"🕐 总行程：{plan.total_duration}天",
        f"🚗 总距离：{plan.total_distance}公里",
        f"💰 预算范围：{plan.estimated_budget}",
        f"🌟 最佳旅行时间：{plan.best_travel_time}",
        "",
        "📅 详细行程安排",
        RULE,
        "",
    ]

    for index in range(len(plan.route)):
        lines.extend(_format_stop(plan, index))

    lines.extend(["💡 旅行贴士", RULE])
    lines.extend(f"• {tip}" for tip in plan.tips)

    return "\n".join(lines)
