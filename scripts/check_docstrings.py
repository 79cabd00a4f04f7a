"""Check that all code blocks in docstrings are properly closed."""

import ast
import re
from pathlib import Path
from typing import TYPE_CHECKING, NamedTuple

import rich
import rich.table
import rich.text

import pyostream as ps

if TYPE_CHECKING:
    from typing import TypeIs

SRC_DIR = Path().joinpath("src", "pyostream")
CODE_BLOCK_PATTERN = re.compile(r"^```(\w*)", re.MULTILINE)
SKIP_DECORATORS = frozenset({"overload", "override", "renamed", "wraps"})


class DocstringError(NamedTuple):
    """Error found in a docstring."""

    file_path: Path
    func_name: str
    line_no: int
    message: str


class State(NamedTuple):
    """State during code block traversal."""

    errors: tuple[DocstringError, ...]
    open_block: ps.Option[int]


def _is_documentable(node: ast.AST) -> "TypeIs[ast.FunctionDef | ast.AsyncFunctionDef]":
    return isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))


def _has_skip_decorator(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    """Check if function has a decorator that should skip docstring check."""
    return ps.from_(node.decorator_list).any(
        lambda d: (isinstance(d, ast.Name) and d.id in SKIP_DECORATORS)
        or (isinstance(d, ast.Attribute) and d.attr in SKIP_DECORATORS)
        or (
            isinstance(d, ast.Call)
            and isinstance(d.func, ast.Name)
            and d.func.id in SKIP_DECORATORS
        )
    )


def _is_public(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    return not node.name.startswith("_")


def _check_code_blocks(
    file_path: Path, node: ast.FunctionDef | ast.AsyncFunctionDef, docstring: str
) -> tuple[DocstringError, ...]:
    """Check that every opened block is closed, and that at least one python block exists."""

    def _error(line_no: int, message: str) -> DocstringError:
        return DocstringError(file_path, node.name, line_no, message)

    def _process_line(state: State, numbered: tuple[int, str]) -> State:
        line_num, line = numbered
        stripped = line.strip()
        if not CODE_BLOCK_PATTERN.search(stripped):
            return state
        match state.open_block:
            case ps.Some(_) if stripped == "```":
                return State(state.errors, ps.NONE)
            case ps.Some(opened):
                return State(
                    (*state.errors, _error(node.lineno + opened, "Nested ``` block")),
                    state.open_block,
                )
            case _ if stripped == "```":
                return State(
                    (
                        *state.errors,
                        _error(
                            node.lineno + line_num,
                            "Closing block ``` without matching opening",
                        ),
                    ),
                    ps.NONE,
                )
            case _:
                return State(state.errors, ps.Some(line_num))

    lines = docstring.split("\n")
    final = ps.from_(lines).enumerate_tuple().fold(State((), ps.NONE), _process_line)
    errors = final.errors + final.open_block.map(
        lambda opened: (_error(node.lineno + opened, "Unclosed ``` block"),)
    ).unwrap_or(())
    has_python_block = ps.from_(lines).any(
        lambda line: line.strip().startswith("```python")
    )
    if not has_python_block and _is_public(node):
        errors += (_error(node.lineno, "Missing ```python example"),)
    return errors


def _process_node(
    file_path: Path, node: ast.FunctionDef | ast.AsyncFunctionDef
) -> tuple[DocstringError, ...]:
    docstring = ast.get_docstring(node)
    if docstring is None:
        if _is_public(node) and not node.name.istitle():
            return (DocstringError(file_path, node.name, node.lineno, "Missing docstring"),)
        return ()
    return _check_code_blocks(file_path, node, docstring)


def _check_file(file_path: Path) -> list[DocstringError]:
    try:
        tree = ast.parse(file_path.read_text(encoding="utf-8"))
    except SyntaxError:
        return []
    nodes = [node for node in ast.walk(tree) if _is_documentable(node)]
    return (
        ps.from_(nodes)
        .filter(lambda node: not _has_skip_decorator(node))
        .filter(lambda node: not node.name.startswith("__"))
        .flat_map(lambda node: _process_node(file_path, node))
        .collect()
    )


def main() -> None:
    """Check all docstrings in the project."""
    rich.print(
        rich.text.Text(
            "Checking docstrings for properly closed code blocks...", style="cyan bold"
        )
    )
    files = sorted(SRC_DIR.rglob("*.py"))
    rich.print(f"Checking {len(files)} py files...")
    all_errors = ps.from_(files).flat_map(_check_file).collect()

    if not all_errors:
        rich.print(rich.text.Text("[OK] No issues found!", style="green"))
        return

    table = rich.table.Table(title="Issues Found", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Function", style="magenta")
    table.add_column("Error", style="red")
    ps.from_(all_errors).for_each(
        lambda error: table.add_row(
            f"{error.file_path}:{error.line_no}",
            error.func_name,
            error.message,
        )
    )
    rich.print(table)
    rich.print(
        rich.text.Text(f"\n[FAILED] Found {len(all_errors)} issue(s)", style="red")
    )


if __name__ == "__main__":
    main()
