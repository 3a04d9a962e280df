"""A list box that browses directories and filters files by extension."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .listbox import SCROLLBAR_WIDTH, ListBox

logger = logging.getLogger(__name__)

PARENT = ".."


@dataclass
class File:
    """A directory entry as shown by a FileSelector."""

    name: str
    name_with_path: str = ""
    is_dir: bool = False
    order: int = 2
    size: int = 0


class FileSelector(ListBox):
    """Lists the current directory; tapping a directory enters it."""

    def __init__(self, x, y, width, height, vram=None, visible=True, font=None):
        super().__init__(x, y, width, height, vram, 0, False, visible, font=font)
        self.current_directory = "/"
        self.filters: dict[str, list[str]] = {}
        self.active_filterset = ""
        self.filelist: list[File] = []
        self.filelist_refresh = True
        self.ignore_draws = False
        self.parent_requested_draw = False
        self.on_file_select: Callable[[File], None] | None = None
        self.on_dir_change: Callable[[str], None] | None = None

    def please_draw(self) -> None:
        if self.filelist_refresh:
            self.read_directory()
            self.filelist_refresh = False
        super().please_draw()

    def invalidate_file_list(self) -> None:
        self.filelist_refresh = True

    def pen_down(self, x: int, y: int) -> None:
        self.ignore_draws = True
        try:
            super().pen_down(x, y)
        finally:
            self.ignore_draws = False

        touched_entry = (x - self.x) < self.width - SCROLLBAR_WIDTH
        if self.active_element >= len(self.elements) or self.active_element >= len(self.filelist):
            touched_entry = False

        if touched_entry:
            entry = self.filelist[self.active_element]
            if entry.is_dir and entry.name != PARENT:
                self._change_dir(self.current_directory + entry.name + "/")
            elif entry.name == PARENT:
                name = self.current_directory
                slashpos = name.rfind("/", 0, len(name) - 1)
                if slashpos != -1:
                    self._change_dir(name[:slashpos] + name[len(name) - 1:])
            elif self.on_file_select is not None:
                self.on_file_select(entry)

        if self.parent_requested_draw or self.filelist_refresh:
            self.please_draw()
            self.parent_requested_draw = False

    def _change_dir(self, directory: str) -> None:
        self.current_directory = directory
        self.active_element = 0
        if self.on_dir_change is not None:
            self.on_dir_change(self.current_directory)
        self.invalidate_file_list()

    def register_file_select_callback(self, on_file_select: Callable[[File], None] | None) -> None:
        self.on_file_select = on_file_select

    def register_dir_change_callback(self, on_dir_change: Callable[[str], None] | None) -> None:
        self.on_dir_change = on_dir_change

    def add_filter(self, filtername: str, extensions: Iterable[str]) -> None:
        """Define a filter; the first one defined becomes active."""
        self.filters[filtername] = list(extensions)
        if len(self.filters) == 1:
            self.active_filterset = filtername
        self.invalidate_file_list()

    def select_filter(self, filtername: str) -> None:
        self.active_filterset = filtername
        self.invalidate_file_list()

    def selected_file(self) -> File | None:
        """The active entry, or None if nothing or the parent entry is active."""
        if self.active_element < len(self.filelist):
            entry = self.filelist[self.active_element]
            if entry.name != PARENT:
                return entry
        return None

    def set_dir(self, directory: str) -> None:
        if not directory.endswith("/"):
            directory += "/"
        self.current_directory = directory

    def _draw(self) -> None:
        if self.ignore_draws:
            self.parent_requested_draw = True
        else:
            super()._draw()

    def _passes_filter(self, entry: File) -> bool:
        if entry.is_dir or not self.active_filterset:
            return True
        _, dot, ext = entry.name.rpartition(".")
        extension = ext.lower() if dot else ""
        return extension in self.filters.get(self.active_filterset, [])

    def read_directory(self) -> None:
        """Read the current directory into the sorted, filtered file list."""
        self.filelist = []
        self.elements = []
        self.active_element = 0
        self.scrollpos = 0
        try:
            with os.scandir(self.current_directory) as entries:
                for dirent in entries:
                    if dirent.name.startswith("."):
                        continue
                    try:
                        is_dir = dirent.is_dir(follow_symlinks=False)
                    except OSError:
                        is_dir = False
                    self.filelist.append(File(
                        name=dirent.name,
                        name_with_path=self.current_directory + dirent.name,
                        is_dir=is_dir,
                        order=1 if is_dir else 2,
                    ))
        except OSError as exc:
            logger.warning("cannot read directory %s: %s", self.current_directory, exc)
            return

        self.filelist = [f for f in self.filelist if self._passes_filter(f)]

        if self.current_directory != "/" and not self.current_directory.endswith(":/"):
            self.filelist.append(File(name=PARENT, is_dir=True, order=0))

        self.filelist.sort(key=lambda f: (f.order, f.name.lower()))
        self.elements = [f"[{f.name}]" if f.is_dir else f.name for f in self.filelist]