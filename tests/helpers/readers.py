"""In-memory FragmentReader implementations for tests."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DictFragmentReader:
    """FragmentReader backed by a mapping of relative path -> text.

    Paths listed in ``broken`` exist but raise OSError when read.
    """

    files: dict[str, str]
    broken: frozenset[str] = frozenset()
    reads: list[str] = field(default_factory=list)

    def exists(self, relative_path: str) -> bool:
        return relative_path in self.files or relative_path in self.broken

    def read(self, relative_path: str) -> str:
        self.reads.append(relative_path)
        if relative_path in self.broken:
            msg = f"Permission denied: {relative_path}"
            raise OSError(msg)
        return self.files[relative_path]

    def list_dir(self, relative_path: str) -> tuple[str, ...]:
        prefix = relative_path.rstrip("/") + "/"
        names = {
            path[len(prefix):].split("/", 1)[0]
            for path in self.files
            if path.startswith(prefix)
        }
        if not names:
            msg = f"No such directory: {relative_path}"
            raise FileNotFoundError(msg)
        return tuple(sorted(names))

    def describe_path(self, relative_path: str) -> str:
        return f"memory://{relative_path}"
