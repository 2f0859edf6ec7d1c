from typing import TextIO
import sys

from boilerplate.config import BuildInfo


def version_main(build_info: BuildInfo, out: TextIO | None = None) -> None:
    out = out if out is not None else sys.stdout
    out.write(f"Version:      {build_info.version}\n")
    out.write(f"Build Date:   {build_info.build_date}\n")
    out.write(f"Git Revision: {build_info.git_revision}\n")
