"""Build SUMMARY.md for a book source directory from its file tree."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .config import PREPROCESSOR_NAME, AutoGenConfig, DirectoryWithoutIndexBehavior

SUMMARY_FILE = "SUMMARY.md"
SUMMARY_HEADER = "# Summary\n"
ROOT_TITLE = "Welcome"
SEPARATOR_LINE = "\n----\n"


@dataclass
class MdEntry:
    """One entry of the summary; a draft entry has no path."""

    title: str
    path: Path | None
    sorting_path: Path
    children: list[MdEntry] = field(default_factory=list)

    @property
    def is_dir(self) -> bool:
        return bool(self.children)


class AutoGenSummary:
    """Preprocessor that regenerates SUMMARY.md and reloads the book."""

    def name(self) -> str:
        return PREPROCESSOR_NAME

    def run(self, ctx: Mapping[str, Any], book: Any) -> dict[str, Any]:
        """Regenerate the summary and return the book built from it."""
        book_config = ctx.get("config") or {}
        config = AutoGenConfig()
        config.apply_config(book_config)

        book_section = book_config.get("book") or {}
        source_dir = Path(ctx["root"]) / book_section.get("src", "src")

        group = gen_summary(source_dir, config)
        return _book_from_group(source_dir, group)

    def supports_renderer(self, renderer: str) -> bool:
        return renderer != "not-supported"


def _read_text(path: Path) -> str:
    return path.read_bytes().decode("utf-8")


def _relativize(root_dir: Path, path: Path | None) -> str:
    if path is None:
        return ""
    return path.relative_to(root_dir).as_posix()


def generate_summary_line(indentation_level: int, title: str, link: str) -> str:
    """Format one list item of the summary."""
    return f"{' ' * (4 * indentation_level)}* [{title}]({link})"


def get_title(md_file_path: Path | str) -> str:
    """Return the text of the first ``# `` heading in a file, or ''."""
    for line in _read_text(Path(md_file_path)).split("\n"):
        if line.startswith("# "):
            return line.strip("#").strip()
    return ""


def walk_dir(directory: Path | str, config: AutoGenConfig) -> MdEntry | None:
    """Collect the markdown entries below ``directory``.

    Returns None when the directory has no index and is to be ignored.
    """
    directory = Path(directory)
    child_dirs: list[Path] = []
    children: list[MdEntry] = []
    index_path: Path | None = None

    with os.scandir(directory) as scan:
        entries = sorted(scan, key=lambda e: e.name)

    for entry in entries:
        path = directory / entry.name
        if entry.is_dir(follow_symlinks=False):
            child_dirs.append(path)
            continue
        if entry.name in config.directory_index_names:
            index_path = path
            continue
        if path.suffix != ".md":
            continue
        title = get_title(path)
        link_text = title if config.first_line_as_link_text and title else entry.name
        children.append(MdEntry(link_text, path, path))

    if index_path is None:
        behavior = config.directory_without_index_behavior
        if behavior is DirectoryWithoutIndexBehavior.IGNORE:
            return None
        if behavior is DirectoryWithoutIndexBehavior.GENERATE_STUB_INDEX:
            index_path = directory / config.generated_directory_index_name
            index_path.parent.mkdir(parents=True, exist_ok=True)
            index_path.write_bytes(b"")

    children.extend(
        sub for sub in (walk_dir(d, config) for d in child_dirs) if sub is not None
    )

    dir_name = directory.name or directory.resolve().name
    title = dir_name
    if index_path is not None and config.index_first_line_as_directory_link_text:
        title = get_title(index_path) or dir_name

    return MdEntry(title, index_path, directory, children)


def sort_entry_recursive(entry: MdEntry) -> None:
    """Sort children by path, at every level."""
    entry.children.sort(key=lambda child: child.sorting_path.parts)
    for child in entry.children:
        sort_entry_recursive(child)


def _top_level_items(group: MdEntry) -> Iterator[tuple[bool, MdEntry]]:
    """Yield (separator_before, child) for the root's children."""
    last_was_dir = False
    for child in group.children:
        name = child.path.name if child.path is not None else None
        if not child.is_dir and name == SUMMARY_FILE:
            continue
        yield last_was_dir or child.is_dir, child
        last_was_dir = child.is_dir


def _entry_lines(root_dir: Path, depth: int, entry: MdEntry) -> Iterator[str]:
    yield generate_summary_line(depth, entry.title, _relativize(root_dir, entry.path))
    for child in entry.children:
        yield from _entry_lines(root_dir, depth + 1, child)


def _warn_unrecognized_root(source_dir: Path, config: AutoGenConfig) -> None:
    suggested = source_dir / config.generated_directory_index_name
    print(
        "Warn: Your root directory is not being recognized. Make sure you have an "
        "index file in your root directory.\n\n"
        "Suggested fixes:\n"
        f"  - Create the file '{suggested}'\n"
        "  - Set the option 'dir-without-index-behavior' to 'draft' or 'gen-stub-index'\n"
        "  - Set the option 'dir-index-names' to the name of a file in the "
        f"directory '{source_dir}'",
        file=sys.stderr,
    )


def _build(source_dir: Path, config: AutoGenConfig) -> tuple[str, MdEntry | None]:
    group = walk_dir(source_dir, config)
    lines = [SUMMARY_HEADER]

    if group is None:
        _warn_unrecognized_root(source_dir, config)
        return "\n".join(lines), None

    if not config.index_first_line_as_directory_link_text:
        group.title = ROOT_TITLE
    sort_entry_recursive(group)

    if group.path is not None:
        lines.append(
            generate_summary_line(0, group.title, _relativize(source_dir, group.path))
        )

    for separator_before, child in _top_level_items(group):
        if separator_before:
            lines.append(SEPARATOR_LINE)
        lines.extend(_entry_lines(source_dir, 0, child))

    return "\n".join(lines), group


def render_summary(source_dir: Path | str, config: AutoGenConfig) -> str:
    """Return the SUMMARY.md text for ``source_dir`` without writing it."""
    text, _ = _build(Path(source_dir), config)
    return text


def gen_summary(source_dir: Path | str, config: AutoGenConfig) -> MdEntry | None:
    """Write SUMMARY.md into ``source_dir`` if its content changed.

    Returns the sorted root entry, or None if the root was not recognized.
    """
    source_dir = Path(source_dir)
    text, group = _build(source_dir, config)

    summary_path = source_dir / SUMMARY_FILE
    summary_path.touch(exist_ok=True)
    if _read_text(summary_path) != text:
        summary_path.write_bytes(text.encode("utf-8"))
    return group


def _chapter(
    root_dir: Path,
    title: str,
    path: Path | None,
    children: list[MdEntry],
    number: list[int],
    parent_names: list[str],
) -> dict[str, Any]:
    link = _relativize(root_dir, path) if path is not None else None
    sub_items = [
        _chapter(
            root_dir,
            child.title,
            child.path,
            child.children,
            [*number, position],
            [*parent_names, title],
        )
        for position, child in enumerate(children, start=1)
    ]
    return {
        "Chapter": {
            "name": title,
            "content": _read_text(path) if path is not None else "",
            "number": number,
            "sub_items": sub_items,
            "path": link,
            "source_path": link,
            "parent_names": parent_names,
        }
    }


def _book_from_group(root_dir: Path, group: MdEntry | None) -> dict[str, Any]:
    sections: list[Any] = []
    if group is not None:
        counter = 0
        if group.path is not None:
            counter += 1
            sections.append(_chapter(root_dir, group.title, group.path, [], [counter], []))
        for separator_before, child in _top_level_items(group):
            if separator_before:
                sections.append("Separator")
            counter += 1
            sections.append(
                _chapter(root_dir, child.title, child.path, child.children, [counter], [])
            )
    return {"sections": sections, "__non_exhaustive": None}