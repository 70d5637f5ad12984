"""Building blocks for mirror recipes: sites, sources, features and plans.

A recipe never touches the machine directly. It asks a :class:`Host` about
the system and records what should happen in a :class:`Plan`.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Callable, Iterator

from . import osutil


class RecipeError(Exception):
    """A recipe cannot go on because of the user's system or choice."""


class UnsupportedError(RecipeError):
    """The system or version is not supported by the recipe."""


@dataclass(frozen=True)
class MirrorSite:
    """A mirror provider."""

    code: str
    abbr: str
    name: str
    site: str | None = None
    speed_url: str | None = None


UPSTREAM = MirrorSite("upstream", "Upstream", "上游默认源")


@dataclass(frozen=True)
class Source:
    """One mirror site's address for a given target."""

    mirror: MirrorSite
    url: str | None

    @property
    def is_upstream(self) -> bool:
        return self.mirror.code == UPSTREAM.code


class Capability(Enum):
    """How far a target can be changed per project rather than globally."""

    CAN_NOT = "can_not"
    PARTIALLY_CAN = "partially_can"
    FULLY_CAN = "fully_can"


class ChangeType(Enum):
    """How a change of source was carried out."""

    AUTO = "auto"
    RESET = "reset"
    SEMI_AUTO = "semi_auto"
    MANUAL = "manual"
    UNTESTED = "untested"


class RunOption(Flag):
    """Options for running a command."""

    DEFAULT = 0
    NO_LAST_NEW_LINE = auto()
    DONT_NOTIFY_ON_SUCCESS = auto()
    DONT_ABORT_ON_FAILURE = auto()


@dataclass
class Feature:
    """What a target supports."""

    can_get: bool = False
    can_reset: bool = False
    cap_locally: Capability = Capability.CAN_NOT
    cap_locally_explain: str | None = None
    can_english: bool = False
    can_user_define: bool = False
    note: str | None = None


class StepKind(Enum):
    """The kind of action a plan step stands for."""

    RUN = "run"
    NOTE = "note"
    WARN = "warn"
    LOG = "log"
    ERROR = "error"
    ECHO = "echo"
    BACKUP = "backup"
    APPEND = "append"
    PREPEND = "prepend"
    OVERWRITE = "overwrite"
    VIEW = "view"
    ENSURE_DIR = "ensure_dir"
    ENSURE_ROOT = "ensure_root"
    REQUIRE_PROGRAM = "require_program"


@dataclass(frozen=True)
class Step:
    """One recorded action."""

    kind: StepKind
    text: str = ""
    path: str | None = None
    option: RunOption = RunOption.DEFAULT


@dataclass
class Plan:
    """Ordered actions a recipe wants performed, plus its conclusion."""

    steps: list[Step] = field(default_factory=list)
    change_type: ChangeType | None = None
    source: Source | None = None

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def _add(self, kind: StepKind, text: str = "", path: str | None = None,
             option: RunOption = RunOption.DEFAULT) -> None:
        self.steps.append(Step(kind, text, path, option))

    def run(self, command: str, option: RunOption = RunOption.DEFAULT) -> None:
        """Run a shell command."""
        self._add(StepKind.RUN, command, option=option)

    def note(self, message: str) -> None:
        """Tell the user something worth noticing."""
        self._add(StepKind.NOTE, message)

    def warn(self, message: str) -> None:
        """Warn the user."""
        self._add(StepKind.WARN, message)

    def log(self, message: str) -> None:
        """Report progress."""
        self._add(StepKind.LOG, message)

    def error(self, message: str) -> None:
        """Report an error that does not stop the recipe."""
        self._add(StepKind.ERROR, message)

    def echo(self, text: str) -> None:
        """Print text as it is, for the user to copy."""
        self._add(StepKind.ECHO, text)

    def backup(self, path: str) -> None:
        """Copy a file to ``<path>.bak`` before changing it."""
        self._add(StepKind.BACKUP, path=path)

    def append(self, text: str, path: str) -> None:
        """Append text to a file."""
        self._add(StepKind.APPEND, text, path)

    def prepend(self, text: str, path: str) -> None:
        """Insert text at the start of a file."""
        self._add(StepKind.PREPEND, text, path)

    def overwrite(self, text: str, path: str) -> None:
        """Replace a file's content with text."""
        self._add(StepKind.OVERWRITE, text, path)

    def view(self, path: str) -> None:
        """Show a file's content."""
        self._add(StepKind.VIEW, path=path)

    def ensure_dir(self, path: str) -> None:
        """Create a directory if it is missing."""
        self._add(StepKind.ENSURE_DIR, path=path)

    def ensure_root(self) -> None:
        """Require administrator rights."""
        self._add(StepKind.ENSURE_ROOT)

    def require_program(self, name: str) -> None:
        """Require a program to be installed."""
        self._add(StepKind.REQUIRE_PROGRAM, name)

    def commands(self) -> list[str]:
        """The shell commands of the plan, in order."""
        return [step.text for step in self.steps if step.kind is StepKind.RUN]


class Host:
    """The machine recipes inspect; subclass to describe another one."""

    def __init__(self, platform: osutil.Platform | None = None) -> None:
        self.platform = platform if platform is not None else osutil.current_platform()
        self.home = osutil.home_dir(self.platform)

    def file_exists(self, path: str) -> bool:
        return osutil.file_exists(path, self.platform)

    def program_exists(self, name: str) -> bool:
        return shutil.which(name) is not None

    def command_output(self, command: str) -> str | None:
        """Last line printed by a shell command."""
        return osutil.run(command, 0)

    def cpu_arch(self) -> str:
        return platform.machine()


@dataclass(frozen=True)
class Target:
    """Something whose source can be changed, with its recipe functions."""

    name: str
    sources: tuple[Source, ...]
    setsrc: Callable[..., Plan]
    getsrc: Callable[..., Plan] | None = None
    resetsrc: Callable[..., Plan] | None = None
    feature: Feature = field(default_factory=Feature)

    def find_source(self, code: str) -> Source:
        """The source offered by the mirror with this code."""
        for source in self.sources:
            if source.mirror.code == code:
                return source
        raise RecipeError(f"no mirror '{code}' is available for {self.name}")