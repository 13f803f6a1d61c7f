"""
Console tracing of dispatched requests using Rich panels.
"""
import json
from typing import Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from .auth import mask_headers

console = Console(stderr=True)


def format_body(body: bytes, max_chars: int = 500) -> str:
    """Format a raw body for display, pretty-printing JSON when possible."""
    if not body:
        return ""
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        return f"<binary data: {len(body)} bytes>"
    try:
        text = json.dumps(json.loads(text), indent=2, ensure_ascii=False)
    except ValueError:
        pass
    if len(text) > max_chars:
        text = text[:max_chars] + f"... <{len(text) - max_chars} more chars>"
    return text


def print_panel(content: str, title: Optional[str] = None) -> None:
    console.print(Panel(content, title=title))


def print_syntax_panel(code: str, lexer: str = "json", title: Optional[str] = None) -> None:
    syntax = Syntax(code, lexer, theme="monokai", line_numbers=False)
    console.print(Panel(syntax, title=title, expand=True))


def print_request(
    verb: str,
    url: str,
    headers: Dict[str, str],
    body: bytes,
    max_chars: int = 500,
) -> None:
    """Print an outgoing request with credentials masked."""
    print_panel(f"[bold cyan]{verb}[/bold cyan] {url}", title="[bold blue]Request[/bold blue]")
    console.print("[bold]Headers:[/bold]", mask_headers(headers))
    body_str = format_body(body, max_chars)
    if body_str:
        print_syntax_panel(body_str, title="[bold]Request Body[/bold]")


def print_response(url: str, status: int, body: bytes, max_chars: int = 500) -> None:
    """Print a transport response."""
    status_color = "green" if 200 <= status < 300 else "red"
    print_panel(
        f"[bold {status_color}]{status}[/bold {status_color}]",
        title=f"[bold blue]Response[/bold blue] ({url})",
    )
    body_str = format_body(body, max_chars)
    if body_str:
        print_syntax_panel(body_str, title=f"[bold]Response Body[/bold] (URL: {url})")
