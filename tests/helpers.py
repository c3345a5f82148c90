"""Shared fixtures for the test-suite."""

from event_explorer.models import Event


def make_event(title, score=None, date="2020-01-01", lat=0.0, long=0.0, summary=None, url=""):
    return Event(
        title=title,
        summary=summary if summary is not None else f"About {title}",
        lat=lat,
        long=long,
        date=date,
        url=url,
        score=score,
    )


class FakeTask:
    def __init__(self, due, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Manual clock: callbacks only run inside :meth:`advance`."""

    def __init__(self):
        self.now = 0.0
        self.tasks = []

    def schedule(self, delay, callback):
        task = FakeTask(self.now + delay, callback)
        self.tasks.append(task)
        return task

    def pending(self):
        return [t for t in self.tasks if not t.cancelled and not t.fired]

    def advance(self, seconds):
        target = self.now + seconds
        while True:
            due = [t for t in self.pending() if t.due <= target]
            if not due:
                break
            task = min(due, key=lambda t: t.due)
            self.now = task.due
            task.fired = True
            task.callback()
        self.now = target
