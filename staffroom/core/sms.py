# staffroom/core/sms.py
"""Notification text. Nothing is transmitted: messages are stored and logged."""
from datetime import date

PLACEHOLDERS = {
    "teacher_name": "[Teacher Name]",
    "class_name": "[Class]",
    "period": "[Number]",
    "date": "[Date]",
    "time": "[Time]",
    "location": "[Location]",
}

MESSAGE_TEMPLATES = [
    {
        "id": "substitute",
        "name": "Default Substitute Assignment Message",
        "template": (
            "Dear [Teacher Name], You have been assigned as a substitute for [Class] "
            "during Period [Number] on [Date]. Please confirm your availability. Thank you."
        ),
    },
    {
        "id": "meeting",
        "name": "Meeting Notification",
        "template": (
            "Dear [Teacher Name], There will be a staff meeting on [Date] at [Time] "
            "in the [Location]. Your attendance is required. Thank you."
        ),
    },
    {
        "id": "schedule",
        "name": "Schedule Change Alert",
        "template": (
            "Dear [Teacher Name], Please note that there has been a change in your schedule "
            "for [Date]. Please check the updated timetable. Thank you."
        ),
    },
    {
        "id": "custom",
        "name": "Custom Message",
        "template": "",
    },
]


def get_template(template_id: str) -> dict | None:
    return next((t for t in MESSAGE_TEMPLATES if t["id"] == template_id), None)


def format_long_date(day: date) -> str:
    # "March 10, 2025"
    return f"{day:%B} {day.day}, {day.year}"


def render_message(template: str, **values) -> str:
    """Fill ``[Placeholder]`` tokens; unknown keys are ignored, missing ones left as-is."""
    text = template
    for key, value in values.items():
        token = PLACEHOLDERS.get(key)
        if token is None or value is None:
            continue
        if isinstance(value, date):
            value = format_long_date(value)
        text = text.replace(token, str(value))
    return text


def substitute_message(substitute_name: str, class_name: str, period: int, day: date) -> str:
    return render_message(
        get_template("substitute")["template"],
        teacher_name=substitute_name,
        class_name=class_name,
        period=period,
        date=day,
    )
