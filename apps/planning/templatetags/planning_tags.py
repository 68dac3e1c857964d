"""planning/templatetags/planning_tags.py"""

from django import template
from django.utils.html import format_html

from core.utils import calculate_utilization_rate, format_currency

register = template.Library()


@register.filter
def currency(value):
    return format_currency(value)


@register.filter
def utilization(capacity):
    """Percent of a lot's acres in use, from a capacity dict."""
    return calculate_utilization_rate(capacity["used_acres"], capacity["total_acres"])


@register.simple_tag
def render_gantt_bar(entry):
    """Render one timeline entry as an absolutely positioned bar."""
    planting = entry["planting"]
    title = f"{entry['crop']} {entry['variety']} - {entry['acres']} ac ({entry['location']})"
    css = "gantt-bar split" if planting.is_split else "gantt-bar"

    return format_html(
        '<div class="{}" data-planting="{}" title="{}" '
        'style="left: {}%; width: {}%; background-color: {};">'
        '<span class="gantt-label">{}</span></div>',
        css,
        planting.code,
        title,
        entry["left"],
        entry["width"],
        entry["color"],
        entry["crop"],
    )
