from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import re

import boilerplate
from boilerplate.matcher import Template
from boilerplate.text import quote


class ConfigurationError(ValueError):
    """
    Raised for invalid flags, before any file is checked.
    """


E_BOILERPLATE_REQUIRED = "--boilerplate is a required flag."
E_FILE_EXTENSION_REQUIRED = "--file-extension is a required flag."


################################################################################
# Check options
################################################################################

@dataclass
class CheckOptions:
    boilerplate_file: str = ""
    file_extension: str = ""
    exclude_pattern: str = ""
    root: str = "."
    fix: bool = False
    gitignore: bool = False

    # Resolved by prepare()
    template: Template | None = None
    exclude: re.Pattern | None = None

    def prepare(self) -> None:
        """
        Validates the flags, loads the boilerplate and compiles the exclude pattern.
        """
        if self.boilerplate_file == "":
            raise ConfigurationError(E_BOILERPLATE_REQUIRED)
        try:
            with open(self.boilerplate_file, 'rt', encoding='utf-8') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(
                f"error reading --boilerplate file {quote(self.boilerplate_file)}: {e}") from e
        if text == "":
            raise ConfigurationError(f"--boilerplate file {quote(self.boilerplate_file)} is empty")
        self.template = Template.from_text(text)

        if self.file_extension == "":
            raise ConfigurationError(E_FILE_EXTENSION_REQUIRED)
        if '.' in self.file_extension:
            raise ConfigurationError(
                f"--file-extension {quote(self.file_extension)} may not contain '.'")

        if self.exclude_pattern != "":
            try:
                self.exclude = re.compile(self.exclude_pattern)
            except re.error as e:
                raise ConfigurationError(
                    f"error compiling --exclude pattern {quote(self.exclude_pattern)}: {e}") from e

        if not Path(self.root).exists():
            raise ConfigurationError(f"Path does not exist: {self.root}")

    def match(self, path: Path) -> bool:
        # Check whether the file extension matches.
        name = path.name
        ext = name[name.rfind('.') + 1:] if '.' in name else None
        if ext != self.file_extension:
            return False

        # Check whether the file is excluded by a pattern.
        if self.exclude is not None and self.exclude.search(path.as_posix()):
            return False
        return True


################################################################################
# Build info
################################################################################

@dataclass(frozen=True)
class BuildInfo:
    version: str = boilerplate.__version__
    build_date: str = "unknown"
    git_revision: str = "unknown"
