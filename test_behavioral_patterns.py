"""
Tests for the behavioral patterns: Observer, Command and Strategy.
"""

import logging

import pytest
from pydantic import ValidationError

from pattern_catalog.behavioral.command import (
    AppendTextCommand,
    CommandInvoker,
    Light,
    LightOffCommand,
    LightOnCommand,
    MacroCommand,
    PrintCommand,
    TextDocument,
)
from pattern_catalog.behavioral.observer import CallbackObserver, Observer, Subject
from pattern_catalog.behavioral.strategy import (
    AscendingSort,
    DescendingSort,
    FunctionStrategy,
    LengthSort,
    SortContext,
)
from pattern_catalog.core.exceptions import (
    InvalidArgument,
    NothingToRedo,
    NothingToUndo,
    ObserverNotificationError,
    UndoNotSupported,
)


# ----------------------------------------------------------------------
# Observer
# ----------------------------------------------------------------------
class RecordingObserver(Observer):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def update(self, event):
        self.log.append((self.name, event))


class FailingObserver(Observer):
    def update(self, event):
        raise RuntimeError("boom")


def test_observers_notified_once_in_subscription_order():
    log = []
    subject = Subject()
    for name in ("o1", "o2", "o3"):
        subject.subscribe(RecordingObserver(name, log))

    failures = subject.notify_all("changed")

    assert failures == []
    assert log == [("o1", "changed"), ("o2", "changed"), ("o3", "changed")]


def test_unsubscribe_removes_by_identity():
    log = []
    subject = Subject()
    first = RecordingObserver("same", log)
    second = RecordingObserver("same", log)
    subject.subscribe(first)
    subject.subscribe(second)

    assert subject.unsubscribe(first) is True
    assert subject.observers() == [second]
    assert subject.unsubscribe(first) is False


def test_failing_observer_does_not_block_the_rest(caplog):
    log = []
    subject = Subject(raise_on_failure=False)
    failing = FailingObserver()
    subject.subscribe(RecordingObserver("o1", log))
    subject.subscribe(failing)
    subject.subscribe(RecordingObserver("o3", log))

    with caplog.at_level(logging.ERROR, logger="pattern_catalog.behavioral.observer"):
        failures = subject.notify_all(1)

    assert log == [("o1", 1), ("o3", 1)]
    assert len(failures) == 1
    assert failures[0].observer is failing
    assert isinstance(failures[0].error, RuntimeError)
    assert "failed to handle event" in caplog.text


def test_strict_delivery_raises_after_all_observers_ran():
    log = []
    subject = Subject(raise_on_failure=True)
    subject.subscribe(FailingObserver())
    subject.subscribe(RecordingObserver("after", log))

    with pytest.raises(ObserverNotificationError) as exc_info:
        subject.notify_all("event")

    assert log == [("after", "event")]
    assert len(exc_info.value.failures) == 1


def test_subscribe_during_notify_applies_to_next_notification():
    log = []
    subject = Subject()
    late = RecordingObserver("late", log)

    def add_late(event):
        log.append(("early", event))
        if late not in subject.observers():
            subject.subscribe(late)

    subject.subscribe(CallbackObserver(add_late))

    subject.notify_all(1)
    assert log == [("early", 1)], "Observer added mid-delivery must not receive the current event"

    subject.notify_all(2)
    assert log == [("early", 1), ("early", 2), ("late", 2)]


def test_delivery_failure_is_frozen():
    failing = FailingObserver()
    subject = Subject(raise_on_failure=False)
    subject.subscribe(failing)

    failure = subject.notify_all("x")[0]

    with pytest.raises(ValidationError):
        failure.observer = None


def test_callback_observer_and_unsubscribe_during_notify():
    received = []
    subject = Subject()

    def once(event):
        received.append(event)
        subject.unsubscribe(observer)

    observer = CallbackObserver(once)
    subject.subscribe(observer)

    subject.notify_all("a")
    subject.notify_all("b")

    assert received == ["a"]


def test_subscribe_rejects_none():
    with pytest.raises(InvalidArgument):
        Subject().subscribe(None)


# ----------------------------------------------------------------------
# Command
# ----------------------------------------------------------------------
def test_light_commands_execute_and_undo():
    light = Light("kitchen")
    invoker = CommandInvoker()

    invoker.execute(LightOnCommand(light))
    assert light.is_on

    invoker.execute(LightOffCommand(light))
    assert not light.is_on

    invoker.undo()
    assert light.is_on
    invoker.undo()
    assert not light.is_on


def test_append_text_undo_redo_and_replay():
    document = TextDocument()
    invoker = CommandInvoker()
    hello = AppendTextCommand(document, "Hello")
    world = AppendTextCommand(document, ", world")

    invoker.execute(hello)
    invoker.execute(world)
    assert document.text == "Hello, world"

    assert invoker.undo() is world
    assert document.text == "Hello"
    assert invoker.can_redo()

    assert invoker.redo() is world
    assert document.text == "Hello, world"

    assert invoker.replay() == 2
    assert document.text == "Hello, worldHello, world"
    assert len(invoker.history()) == 4
    assert not invoker.can_redo()

    while invoker.can_undo():
        invoker.undo()
    assert document.text == "", "Undoing everything after replay must restore the document"


def test_new_command_clears_redo_stack():
    document = TextDocument()
    invoker = CommandInvoker()
    invoker.execute(AppendTextCommand(document, "a"))
    invoker.undo()

    invoker.execute(AppendTextCommand(document, "b"))

    assert not invoker.can_redo()
    with pytest.raises(NothingToRedo):
        invoker.redo()


def test_undo_with_empty_history():
    with pytest.raises(NothingToUndo):
        CommandInvoker().undo()


def test_non_undoable_command_stays_in_history():
    invoker = CommandInvoker()
    command = PrintCommand(logging.getLogger("test"), "hello")
    invoker.execute(command)

    assert command.supports_undo is False
    with pytest.raises(UndoNotSupported):
        invoker.undo()
    assert invoker.history() == [command]


def test_macro_command_undoes_in_reverse():
    document = TextDocument("x")
    macro = MacroCommand(AppendTextCommand(document, "1"), AppendTextCommand(document, "2"))

    macro.execute()
    assert document.text == "x12"
    macro.undo()
    assert document.text == "x"


def test_history_is_bounded():
    document = TextDocument()
    invoker = CommandInvoker(history_limit=2)
    for char in "abc":
        invoker.execute(AppendTextCommand(document, char))

    assert len(invoker.history()) == 2
    invoker.undo()
    invoker.undo()
    assert document.text == "a"
    with pytest.raises(NothingToUndo):
        invoker.undo()


def test_command_requires_receiver():
    with pytest.raises(InvalidArgument):
        LightOnCommand(None)
    with pytest.raises(InvalidArgument):
        AppendTextCommand(None, "text")
    with pytest.raises(InvalidArgument):
        CommandInvoker(history_limit=0)


# ----------------------------------------------------------------------
# Strategy
# ----------------------------------------------------------------------
def test_context_uses_current_strategy():
    context = SortContext(AscendingSort())

    assert context.run([3, 1, 2]) == [1, 2, 3]


def test_swapping_strategy_affects_later_calls_only():
    context = SortContext(AscendingSort())
    first = context.run([3, 1, 2])

    context.set_strategy(DescendingSort())
    second = context.run([3, 1, 2])

    assert first == [1, 2, 3]
    assert second == [3, 2, 1]
    assert isinstance(context.strategy, DescendingSort)


def test_run_does_not_mutate_input():
    items = ["ccc", "a", "bb"]
    result = SortContext(LengthSort()).run(items)

    assert result == ["a", "bb", "ccc"]
    assert items == ["ccc", "a", "bb"]


def test_function_strategy():
    context = SortContext(FunctionStrategy(key=lambda pair: pair[1], reverse=True))

    assert context.run([("a", 1), ("b", 3), ("c", 2)]) == [("b", 3), ("c", 2), ("a", 1)]


def test_strategy_must_not_be_none():
    with pytest.raises(InvalidArgument):
        SortContext(None)
    context = SortContext(AscendingSort())
    with pytest.raises(InvalidArgument):
        context.set_strategy(None)


# ----------------------------------------------------------------------
# Command failure handling and history bookkeeping
# ----------------------------------------------------------------------
def test_failing_macro_rolls_back_completed_children():
    document = TextDocument()
    invoker = CommandInvoker()
    macro = MacroCommand(AppendTextCommand(document, "a"), AppendTextCommand(document, None))

    with pytest.raises(TypeError):
        invoker.execute(macro)

    assert document.text == "", "Children that ran before the failure must be undone"
    assert invoker.history() == []
    assert not invoker.can_undo()


def test_failed_append_leaves_no_undo_entry():
    document = TextDocument("base")
    broken = AppendTextCommand(document, None)

    with pytest.raises(TypeError):
        broken.execute()

    with pytest.raises(NothingToUndo):
        broken.undo()
    assert document.text == "base"


def test_macro_with_non_undoable_child_keeps_history():
    document = TextDocument()
    invoker = CommandInvoker()
    macro = MacroCommand(
        AppendTextCommand(document, "x"),
        PrintCommand(logging.getLogger("test"), "done"),
    )
    invoker.execute(macro)

    assert macro.supports_undo is False
    with pytest.raises(UndoNotSupported):
        invoker.undo()
    assert invoker.history() == [macro]
    assert document.text == "x"


def test_redo_after_history_eviction():
    document = TextDocument()
    invoker = CommandInvoker(history_limit=2)
    for char in "abc":
        invoker.execute(AppendTextCommand(document, char))

    invoker.undo()
    assert document.text == "ab"

    invoker.redo()
    assert document.text == "abc"
    assert len(invoker.history()) == 2

    invoker.undo()
    invoker.undo()
    assert document.text == "a", "Evicted command 'a' is no longer undoable"
    with pytest.raises(NothingToUndo):
        invoker.undo()


def test_evicted_executions_drop_their_undo_entries():
    light = Light()
    command = LightOnCommand(light)
    invoker = CommandInvoker(history_limit=1)

    for _ in range(5):
        invoker.execute(command)

    assert len(command._saved) == 1, "Undo entries must not outgrow the history"
    invoker.undo()
    assert light.is_on, "The remaining entry belongs to the newest execution"
    with pytest.raises(NothingToUndo):
        command.undo()
