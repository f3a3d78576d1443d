"""Rendering of the usage tree as an indented, colored text report."""

from enum import Enum

from rich.text import Text

from .file_tree import FileNode

SPACE = ' '
SPLITTER = '│'
LINKER = '─'
LAST_LINKER = '└'
PARTIAL_LINKER = '├'
NEWLINE = '\n'


class Usage(Enum):
    """Usage classification of a node, valued by its display style."""
    UNUSED = 'red'
    PARTIAL = 'yellow'
    FULL = 'green'
    PLAIN = ''


def classify(node: FileNode, only_show_unused: bool) -> Usage:
    """Classify a node as unused, partially used or fully used.

    With only_show_unused the tree holds unused files only, so directories
    are always shown as partial and files carry no tone.
    """
    if only_show_unused:
        return Usage.PARTIAL if node.is_dir else Usage.PLAIN

    if node.used_count == 0:
        return Usage.UNUSED
    if not node.is_dir:
        return Usage.FULL
    if node.used_count >= node.sub_file_count:
        return Usage.FULL
    return Usage.PARTIAL


def render_legend() -> Text:
    """Legend explaining the three colors."""
    legend = Text(NEWLINE + 'Total File List:' + NEWLINE + '(')
    legend.append('redFileName', style=Usage.UNUSED.value)
    legend.append(' is not used; ')
    legend.append('yellowFileName', style=Usage.PARTIAL.value)
    legend.append(' is partly used; ')
    legend.append('greenFileName', style=Usage.FULL.value)
    legend.append(' is fully used)')
    return legend


LEGEND = render_legend().plain


def render_tree(forest: list[FileNode], only_show_unused: bool) -> Text:
    """Render the forest pre-order, one line per node.

    Args:
        forest: Top-level nodes with counts already filled in
        only_show_unused: Whether the forest was built from unused files only

    Returns:
        Styled text; use `.plain` for the uncolored report body
    """
    out = Text()

    def render(nodes: list[FileNode], prefix: str) -> None:
        for index, node in enumerate(nodes):
            is_last = index == len(nodes) - 1
            connector = LAST_LINKER if is_last else PARTIAL_LINKER
            out.append(prefix + connector + LINKER)
            out.append(node.name, style=classify(node, only_show_unused).value)
            out.append(NEWLINE)
            if node.is_dir and node.children:
                render(node.children, prefix + (SPACE if is_last else SPLITTER) + SPACE)

    render(forest, '')
    return out


def render_report(forest: list[FileNode], only_show_unused: bool) -> Text:
    """Legend followed by the rendered tree, as shown on the console."""
    report = render_legend()
    report.append(NEWLINE)
    report.append_text(render_tree(forest, only_show_unused))
    return report
