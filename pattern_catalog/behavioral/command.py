"""
Command Pattern

Each command captures a receiver and its parameters at construction time.
CommandInvoker runs, undoes, redoes and replays commands knowing only the
Command capability.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, List, Optional
import logging

from pattern_catalog.core.config_manager import config_manager
from pattern_catalog.core.exceptions import (
    InvalidArgument,
    NothingToRedo,
    NothingToUndo,
    UndoNotSupported,
)

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Receivers
# ----------------------------------------------------------------------
class Light:
    def __init__(self, location: str = "room") -> None:
        self.location = location
        self.is_on = False

    def turn_on(self) -> None:
        self.is_on = True

    def turn_off(self) -> None:
        self.is_on = False


class TextDocument:
    def __init__(self, text: str = "") -> None:
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def append(self, text: str) -> None:
        self._text += text

    def truncate(self, length: int) -> None:
        self._text = self._text[:length]


# ----------------------------------------------------------------------
# Commands
# ----------------------------------------------------------------------
class Command(ABC):
    """
    Capability required by the invoker.

    Undoable commands keep one undo entry per execution. The invoker calls
    forget_oldest() when its bounded history evicts an execution, so those
    entries never outgrow the history.
    """

    @abstractmethod
    def execute(self) -> None:
        ...

    @property
    def supports_undo(self) -> bool:
        return False

    def undo(self) -> None:
        raise UndoNotSupported(f"{self.__class__.__name__} cannot be undone")

    def forget_oldest(self) -> None:
        """Drop the undo entry of the oldest recorded execution."""
        pass

    @staticmethod
    def _require(receiver, name: str):
        if receiver is None:
            raise InvalidArgument(f"{name} receiver must not be None")
        return receiver


class UndoStackCommand(Command):
    """Base for commands that save a value before each execution."""

    def __init__(self) -> None:
        self._saved: Deque = deque()

    @property
    def supports_undo(self) -> bool:
        return True

    def forget_oldest(self) -> None:
        if self._saved:
            self._saved.popleft()

    def _pop_saved(self):
        if not self._saved:
            raise NothingToUndo(f"{self.__class__.__name__} has not been executed")
        return self._saved.pop()


class LightOnCommand(UndoStackCommand):
    def __init__(self, light: Light) -> None:
        super().__init__()
        self._light = self._require(light, "Light")

    def execute(self) -> None:
        was_on = self._light.is_on
        self._light.turn_on()
        self._saved.append(was_on)

    def undo(self) -> None:
        if not self._pop_saved():
            self._light.turn_off()


class LightOffCommand(UndoStackCommand):
    def __init__(self, light: Light) -> None:
        super().__init__()
        self._light = self._require(light, "Light")

    def execute(self) -> None:
        was_on = self._light.is_on
        self._light.turn_off()
        self._saved.append(was_on)

    def undo(self) -> None:
        if self._pop_saved():
            self._light.turn_on()


class AppendTextCommand(UndoStackCommand):
    def __init__(self, document: TextDocument, text: str) -> None:
        super().__init__()
        self._document = self._require(document, "TextDocument")
        self._text = text

    def execute(self) -> None:
        length = len(self._document.text)
        self._document.append(self._text)
        # only recorded once the append went through
        self._saved.append(length)

    def undo(self) -> None:
        self._document.truncate(self._pop_saved())


class PrintCommand(Command):
    """Writes a fixed message through a logger. Not undoable."""

    def __init__(self, receiver: logging.Logger, message: str) -> None:
        self._receiver = self._require(receiver, "Logger")
        self._message = message

    def execute(self) -> None:
        self._receiver.info(self._message)


class MacroCommand(Command):
    """
    Runs children in order and undoes them in reverse order.

    If a child fails, the children that already ran are undone in reverse
    (those that support undo) and the error is re-raised.
    """

    def __init__(self, *commands: Command) -> None:
        self._commands = list(commands)

    @property
    def supports_undo(self) -> bool:
        return all(command.supports_undo for command in self._commands)

    def execute(self) -> None:
        completed: List[Command] = []
        try:
            for command in self._commands:
                command.execute()
                completed.append(command)
        except Exception:
            logger.warning(
                f"MacroCommand failed after {len(completed)} of {len(self._commands)} commands, rolling back"
            )
            for command in reversed(completed):
                if command.supports_undo:
                    command.undo()
            raise

    def undo(self) -> None:
        if not self.supports_undo:
            super().undo()
        for command in reversed(self._commands):
            command.undo()

    def forget_oldest(self) -> None:
        for command in self._commands:
            command.forget_oldest()


# ----------------------------------------------------------------------
# Invoker
# ----------------------------------------------------------------------
class CommandInvoker:
    """
    Executes commands and keeps a bounded history for undo, redo and replay.

    Every execution, including redo and replay, is recorded in the history,
    so undoing until the history is empty restores the receivers.
    """

    def __init__(self, history_limit: Optional[int] = None) -> None:
        if history_limit is None:
            history_limit = config_manager.get_command_settings()["history_limit"]
        if history_limit < 1:
            raise InvalidArgument("history_limit must be at least 1", {"history_limit": history_limit})
        self._history: Deque[Command] = deque(maxlen=history_limit)
        self._redo: List[Command] = []

    def _record(self, command: Command) -> None:
        if len(self._history) == self._history.maxlen:
            evicted = self._history[0]
            evicted.forget_oldest()
            logger.debug(f"Evicted {evicted.__class__.__name__} from history")
        self._history.append(command)

    def execute(self, command: Command) -> None:
        if command is None:
            raise InvalidArgument("Cannot execute None")
        command.execute()
        self._record(command)
        self._redo.clear()
        logger.debug(f"Executed {command.__class__.__name__}")

    def undo(self) -> Command:
        """
        Undo the most recent command.

        Raises:
            NothingToUndo: If the history is empty
            UndoNotSupported: If the last command cannot be undone; history is kept
        """
        if not self._history:
            raise NothingToUndo("No command to undo")
        command = self._history[-1]
        command.undo()
        self._history.pop()
        self._redo.append(command)
        logger.debug(f"Undid {command.__class__.__name__}")
        return command

    def redo(self) -> Command:
        if not self._redo:
            raise NothingToRedo("No command to redo")
        command = self._redo.pop()
        command.execute()
        self._record(command)
        logger.debug(f"Redid {command.__class__.__name__}")
        return command

    def replay(self) -> int:
        """
        Execute every command in history again, oldest first.

        Each replayed execution is appended to the history and the redo
        stack is cleared, as with execute().
        """
        commands = list(self._history)
        for command in commands:
            command.execute()
            self._record(command)
        self._redo.clear()
        return len(commands)

    def history(self) -> List[Command]:
        return list(self._history)

    def can_undo(self) -> bool:
        return bool(self._history)

    def can_redo(self) -> bool:
        return bool(self._redo)
