"""
Paginated layout engine.

Positions content on fixed-size pages with a single downward-moving cursor.
Coordinates follow PDF conventions: origin at the bottom-left corner of the
page, y increasing upward, units in points.

The engine produces draw commands only. Turning them into PDF bytes is the job
of pdf_writer.write_pdf().
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Union

from quill.contexts.templating.style_config import RGB, Margins, StyleConfig

Point = Tuple[float, float]


@dataclass(frozen=True)
class TextRun:
    """A run of text drawn with its baseline starting at (x, y)."""

    page_index: int
    text: str
    x: float
    y: float
    font: str
    size: float
    color: RGB


@dataclass(frozen=True)
class Line:
    """A straight stroke from start to end."""

    page_index: int
    start: Point
    end: Point
    thickness: float
    color: RGB


@dataclass(frozen=True)
class Rect:
    """A filled rectangle with its bottom-left corner at (x, y)."""

    page_index: int
    x: float
    y: float
    width: float
    height: float
    color: RGB


DrawCommand = Union[TextRun, Line, Rect]


@dataclass(frozen=True)
class Page:
    index: int
    width: float
    height: float


@dataclass
class LayoutCursor:
    """Current page and vertical position (baseline of the next line)."""

    page_index: int
    y: float


@dataclass
class RenderedDocument:
    """
    Finished layout: page set plus draw commands in draw order.

    Attributes:
        pages: Pages in order (never empty)
        commands: Draw commands, each tagged with its page index
    """

    pages: List[Page] = field(default_factory=list)
    commands: List[DrawCommand] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def commands_for_page(self, page_index: int) -> List[DrawCommand]:
        return [command for command in self.commands if command.page_index == page_index]

    @property
    def text_runs(self) -> List[TextRun]:
        return [command for command in self.commands if isinstance(command, TextRun)]

    def plain_text(self) -> str:
        """Text runs joined with newlines (draw order), for inspection and tests."""
        return "\n".join(run.text for run in self.text_runs)


class PageLayoutEngine:
    """
    Stateful cursor over a paginated canvas.

    The engine starts with one blank page and the cursor at the top margin.
    Callers reserve space with ensure_space() before each atomic draw, draw at
    the cursor, then advance() by the line height.

    Example:
        engine = PageLayoutEngine.from_style(style)
        engine.ensure_space(13)
        engine.draw_text("Hello", engine.left, 10, "Helvetica", (0, 0, 0))
        engine.advance(13)
        rendered = engine.finish()
    """

    def __init__(self, page_width: float, page_height: float, margins: Margins):
        self.page_width = page_width
        self.page_height = page_height
        self.margins = margins

        self._pages: List[Page] = []
        self._commands: List[DrawCommand] = []
        self.cursor = LayoutCursor(page_index=-1, y=self.top_y)
        self.new_page()

    @classmethod
    def from_style(cls, style: StyleConfig) -> "PageLayoutEngine":
        return cls(style.page_width, style.page_height, style.margins)

    @property
    def top_y(self) -> float:
        return self.page_height - self.margins.top

    @property
    def bottom_y(self) -> float:
        return self.margins.bottom

    @property
    def left(self) -> float:
        return self.margins.left

    @property
    def right(self) -> float:
        return self.page_width - self.margins.right

    @property
    def cursor_y(self) -> float:
        return self.cursor.y

    @property
    def page_index(self) -> int:
        return self.cursor.page_index

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def new_page(self) -> Page:
        """Append a blank page and move the cursor to its top margin."""
        page = Page(index=len(self._pages), width=self.page_width, height=self.page_height)
        self._pages.append(page)
        self.cursor.page_index = page.index
        self.cursor.y = self.top_y
        return page

    def ensure_space(self, required_height: float) -> bool:
        """
        Start a new page if required_height does not fit above the bottom margin.

        Returns:
            True if a new page was started
        """
        if self.cursor.y - required_height < self.bottom_y:
            self.new_page()
            return True
        return False

    def advance(self, delta_y: float) -> None:
        """Move the cursor down the page by delta_y points."""
        if delta_y < 0:
            raise ValueError(f"Cursor can only move down the page (got delta_y={delta_y})")
        self.cursor.y -= delta_y

    def draw_text(self, text: str, x: float, size: float, font: str, color: RGB) -> TextRun:
        """Emit a text run at (x, cursor_y) on the current page. Does not move the cursor."""
        run = TextRun(
            page_index=self.cursor.page_index,
            text=text,
            x=x,
            y=self.cursor.y,
            font=font,
            size=size,
            color=tuple(color),
        )
        self._commands.append(run)
        return run

    def draw_line(self, start: Point, end: Point, thickness: float, color: RGB) -> Line:
        line = Line(
            page_index=self.cursor.page_index,
            start=tuple(start),
            end=tuple(end),
            thickness=thickness,
            color=tuple(color),
        )
        self._commands.append(line)
        return line

    def draw_rect(self, x: float, y: float, width: float, height: float, color: RGB) -> Rect:
        rect = Rect(
            page_index=self.cursor.page_index,
            x=x,
            y=y,
            width=width,
            height=height,
            color=tuple(color),
        )
        self._commands.append(rect)
        return rect

    def finish(self) -> RenderedDocument:
        """Return the page set and draw commands laid out so far."""
        return RenderedDocument(pages=list(self._pages), commands=list(self._commands))
