import abc
from typing import Any, List, Mapping, Callable
from dataclasses import dataclass
from pathlib import Path
import uuid


@dataclass(frozen=True)
class FileLocation:
    path: Path
    line: int | None = None

    def __str__(self) -> str:
        if self.line is None:
            return str(self.path)
        return f"{self.path}:{self.line}"


@dataclass(frozen=True)
class IssueType:
    """
    Represents a type of issue.
    """
    id: str
    message: str

    def __post_init__(self):
        # Verify that the ID is a valid UUID
        if not isinstance(self.id, str):
            raise ValueError(f"Invalid ID: {self.id}")
        try:
            uuid.UUID(self.id)
        except ValueError:
            raise ValueError(f"Invalid UUID: {self.id}")

    def make(self, **kwargs) -> 'Issue':
        """
        Creates an Issue of this type.
        """
        return Issue(self, data=kwargs)


@dataclass
class Issue:
    """
    Represents an issue found during a check.
    """
    issue_type: IssueType
    data: Mapping[str, Any] | None = None
    location: FileLocation | None = None
    fix: Callable[[], None] | None = None

    def fixable(self, fix: Callable[[], None]) -> 'Issue':
        """
        Marks the issue as fixable.
        """
        self.fix = fix
        return self

    def at(self, path: Path, line: int | None = None) -> 'Issue':
        """
        Returns an Issue with the specified path.
        """
        if self.location is not None and self.location.path != path:
            raise ValueError("Cannot change the path of an existing issue.")
        self.location = FileLocation(path, line)
        return self

    def render(self) -> str:
        """
        Formats the issue as `<path>:<line>: <message>`, always ending in a newline.
        """
        msg = f"{self.location}: " if self.location is not None else ""
        msg += self.issue_type.message.format(**(self.data or {}))
        if not msg.endswith('\n'):
            msg += '\n'
        return msg


class FileCheck(abc.ABC):
    @abc.abstractmethod
    def check(self, path: Path) -> List[Issue]:
        raise NotImplementedError()
