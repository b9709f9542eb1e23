"""Unhandled-rejection tracking."""

import logging

from futura import Env, Evidence, Future, LoggingRejectionTracker, ManualJobQueue, RejectionTrace
from fakes import RecordingTracker, drain, make_env


def test_no_tracker_by_default() -> None:
    env = make_env()
    Future.reject("quiet", env=env)
    drain(env)
    assert env.tracker is None


def test_unhandled_rejection_is_tracked_then_handled() -> None:
    tracker = RecordingTracker()
    env = Env(queue=ManualJobQueue(), tracker=tracker)

    future = Future.reject("r", env=env)
    assert tracker.events == [(future, "reject")]

    future.then(None, lambda reason: None)
    assert tracker.events == [(future, "reject"), (future, "handle")]

    # Only the first late registration reports handling
    future.then(None, lambda reason: None)
    assert len(tracker.events) == 2


def test_rejection_with_registered_reaction_is_not_tracked() -> None:
    tracker = RecordingTracker()
    env = Env(queue=ManualJobQueue(), tracker=tracker)
    deferred = Future.deferred(env=env)
    deferred.future.then(None, lambda reason: "handled")

    deferred.reject("boom")
    drain(env)
    assert tracker.events == []


def test_fulfillment_is_never_tracked() -> None:
    tracker = RecordingTracker()
    env = Env(queue=ManualJobQueue(), tracker=tracker)
    Future.resolve(1, env=env).then(lambda v: v)
    drain(env)
    assert tracker.events == []


def test_trace_reports_unhandled_downstream_future() -> None:
    env = make_env(trace=True)
    trace = env.tracker
    assert isinstance(trace, RejectionTrace)

    deferred = Future.deferred(env=env)
    downstream = deferred.future.then(lambda v: v)
    deferred.reject("lost")
    drain(env)

    assert trace.unhandled() == [downstream]
    events = trace.get_events()
    assert [e.action for e in events] == ["reject"]
    assert isinstance(events[0], Evidence)
    assert events[0].future is downstream


def test_trace_clears_handled_futures() -> None:
    env = make_env(trace=True)
    trace = env.tracker
    assert isinstance(trace, RejectionTrace)

    future = Future.reject("late", env=env)
    assert trace.unhandled() == [future]

    future.catch(lambda reason: None)
    assert trace.unhandled() == []
    assert [e.action for e in trace.get_events()] == ["reject", "handle"]
    assert [e.id for e in trace.get_events()] == [0, 1]

    trace.clear()
    assert len(trace) == 0


def test_disabled_trace_records_nothing() -> None:
    trace = RejectionTrace(enabled=False)
    env = Env(queue=ManualJobQueue(), tracker=trace)
    Future.reject("r", env=env)

    assert len(trace) == 0
    assert trace.unhandled() == []


def test_logging_tracker_warns(caplog) -> None:
    env = Env(queue=ManualJobQueue(), tracker=LoggingRejectionTracker())

    with caplog.at_level(logging.DEBUG, logger="futura.rejections"):
        future = Future.reject("boom", env=env)
        future.catch(lambda reason: None)

    levels = [record.levelno for record in caplog.records if record.name == "futura.rejections"]
    assert levels == [logging.WARNING, logging.DEBUG]
    assert "unhandled rejection" in caplog.text
