"""Task reducers."""

from datetime import date, datetime
from typing import Optional, Union

from lifebooster.models.document import LifeDocument
from lifebooster.models.entities import Priority, Task, new_entity_id, utc_now
from lifebooster.reducers.common import find_by_id, prepend, replace_by_id
from lifebooster.validation import optional_text, parse_choice, parse_day, require_text


def add_task(
    document: LifeDocument,
    text: str,
    day: Optional[Union[str, date]] = None,
    priority: Union[str, Priority] = Priority.MEDIUM,
    time_label: Optional[str] = None,
    now: Optional[datetime] = None,
) -> LifeDocument:
    """
    Add a task to the front of the task list.

    `day` defaults to the local date of `now`. `time_label` defaults to
    the local time of day at which the task was written down.
    """
    text = require_text(text, "text")
    priority = parse_choice(priority, Priority, "priority")
    now = now or utc_now()
    day = parse_day(day) if day is not None else now.astimezone().date()
    time_label = optional_text(time_label, "time", max_length=16)
    if time_label is None:
        time_label = now.astimezone().strftime("%H:%M")

    task = Task(
        id=new_entity_id(now),
        text=text,
        priority=priority,
        day=day,
        time_label=time_label,
    )
    return document.model_copy(update={"tasks": prepend(document.tasks, task)})


def toggle_task(document: LifeDocument, task_id: str) -> LifeDocument:
    """Flip a task between done and not done."""
    task = find_by_id(document.tasks, task_id, "tasks")
    tasks = replace_by_id(document.tasks, task_id, "tasks", completed=not task.completed)
    return document.model_copy(update={"tasks": tasks})
