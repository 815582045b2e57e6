"""CLI for notomattic - daily and standalone plain-text notes."""

import argparse
import json
import platform
import sys
from pathlib import Path
from typing import Any

from . import __version__
from ._logging import configure_logging
from .runtime import build_runtime


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _read_content(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def cmd_init(args: argparse.Namespace, rt: Any) -> int:
    """Create the notes root and its daily/standalone directories."""
    rt.store.ensure_directories()
    if not args.quiet:
        print(f"Notes directory ready: {rt.store.root}")
    return 0


def cmd_ls(args: argparse.Namespace, rt: Any) -> int:
    """List notes, daily first."""
    notes = rt.store.list_notes()
    if args.json:
        _print_json([n.as_dict() for n in notes])
    else:
        for n in notes:
            print(n.path)
    return 0


def cmd_links(args: argparse.Namespace, rt: Any) -> int:
    """Resolve every wiki link in a file (or stdin with '-')."""
    links = rt.notebook.scan_links(_read_content(args.file))
    if args.json:
        _print_json([link.as_dict() for link in links])
        return 0

    for link in links:
        mark = "ok" if link.exists else "missing"
        print(f"{link.text}\t{link.target}\t{mark}")
    return 0


def cmd_resolve(args: argparse.Namespace, rt: Any) -> int:
    """Show which file a link reference points at."""
    exists, target = rt.notebook.resolve(args.ref)
    print(target if exists else f"{target} (missing)")
    return 0 if exists else 1


def cmd_backlinks(args: argparse.Namespace, rt: Any) -> int:
    """Show notes linking to a note, with context."""
    backlinks = rt.notebook.get_backlinks(args.filename)
    if args.json:
        _print_json([b.as_dict() for b in backlinks])
        return 0

    for b in backlinks:
        if not args.quiet:
            print(f"\n{b.from_note} ({b.from_title}):")
        if b.context:
            print(f"  {b.context}")
    return 0


def cmd_link_new(args: argparse.Namespace, rt: Any) -> int:
    """Create a standalone note for a link name."""
    filename = rt.notebook.create_note_from_link(args.name)
    if not args.quiet:
        print(filename)
    return 0


def cmd_rm(args: argparse.Namespace, rt: Any) -> int:
    """Delete a note."""
    rt.store.delete_note(args.filename, is_daily=args.daily)
    return 0


def cmd_mv(args: argparse.Namespace, rt: Any) -> int:
    """Rename a note within its directory."""
    rt.store.rename_note(args.old, args.new, is_daily=args.daily)
    return 0


def cmd_template_ls(args: argparse.Namespace, rt: Any) -> int:
    """List built-in and custom templates."""
    templates = rt.templates.list_templates()
    if args.json:
        _print_json([t.as_dict() for t in templates])
        return 0

    for t in templates:
        marker = "*" if t.is_default else " "
        print(f"{marker} {t.id}\t{t.name}")
    return 0


def cmd_template_show(args: argparse.Namespace, rt: Any) -> int:
    """Print a template body."""
    print(rt.templates.apply_template(args.id), end="")
    return 0


def cmd_template_add(args: argparse.Namespace, rt: Any) -> int:
    """Save a custom template from a file."""
    template = rt.templates.save_template(
        args.name, args.description, args.icon, _read_content(args.file)
    )
    if not args.quiet:
        print(template.id)
    return 0


def cmd_template_update(args: argparse.Namespace, rt: Any) -> int:
    """Replace a custom template."""
    rt.templates.update_template(
        args.id, args.name, args.description, args.icon, _read_content(args.file)
    )
    return 0


def cmd_template_rm(args: argparse.Namespace, rt: Any) -> int:
    rt.templates.delete_template(args.id)
    return 0


def cmd_template_new_note(args: argparse.Namespace, rt: Any) -> int:
    """Create a note from a template."""
    rt.templates.create_note_from_template(
        rt.store, args.filename, args.id, is_daily=args.daily
    )
    if not args.quiet:
        print(args.filename)
    return 0


def cmd_serve(args: argparse.Namespace, rt: Any) -> int:
    """Start local JSON API server."""
    import uvicorn

    from .api.app import create_app, generate_token

    token_arg = args.token
    if token_arg == "auto":
        token = generate_token()
        print(f"Generated bearer token: {token}")
        print(f"Use in requests: Authorization: Bearer {token}")
    elif token_arg == "none":
        print("Warning: Running without authentication. Only use in trusted environments.")
        token = None
    else:
        token = token_arg

    app = create_app(rt, token=token, enable_cors=args.cors)

    host = args.host or rt.config.server.host
    port = args.port or rt.config.server.port
    print(f"Starting server on http://{host}:{port}")

    uvicorn.run(app, host=host, port=port, log_level=rt.config.log.level.lower())
    return 0


def _version_string() -> str:
    return (
        f"notomattic {__version__}\n"
        f"python {platform.python_version()}\n"
        f"platform {platform.platform()}"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notomattic", description="Notomattic CLI"
    )
    parser.add_argument(
        "--version", action="version", version=_version_string()
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: search cwd/notomattic.toml, root/notomattic.toml)",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Notes root directory (overrides config)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Minimize output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    subparsers.add_parser("init", help="Create the notes directories")

    parser_ls = subparsers.add_parser("ls", help="List notes")
    parser_ls.add_argument("--json", action="store_true", help="JSON output")

    parser_links = subparsers.add_parser("links", help="Resolve wiki links in a file")
    parser_links.add_argument("file", help="Note file to scan, or '-' for stdin")
    parser_links.add_argument("--json", action="store_true", help="JSON output")

    parser_resolve = subparsers.add_parser("resolve", help="Resolve a link reference")
    parser_resolve.add_argument("ref", help="Link text, e.g. 'Meeting Notes' or 2024-01-01")

    parser_backlinks = subparsers.add_parser(
        "backlinks", help="Show notes linking to a note"
    )
    parser_backlinks.add_argument("filename", help="Target filename, e.g. project-plan.md")
    parser_backlinks.add_argument("--json", action="store_true", help="JSON output")

    parser_link_new = subparsers.add_parser(
        "link-new", help="Create a standalone note from a link name"
    )
    parser_link_new.add_argument("name", help="Link text; becomes the note heading")

    parser_rm = subparsers.add_parser("rm", help="Delete a note")
    parser_rm.add_argument("filename", help="Note filename")
    parser_rm.add_argument("--daily", action="store_true", help="Note is a daily note")

    parser_mv = subparsers.add_parser("mv", help="Rename a note")
    parser_mv.add_argument("old", help="Current filename")
    parser_mv.add_argument("new", help="New filename")
    parser_mv.add_argument("--daily", action="store_true", help="Note is a daily note")

    parser_template = subparsers.add_parser("template", help="Manage note templates")
    template_sub = parser_template.add_subparsers(dest="template_cmd", required=True)

    parser_template_ls = template_sub.add_parser("ls", help="List templates")
    parser_template_ls.add_argument("--json", action="store_true", help="JSON output")

    parser_template_show = template_sub.add_parser("show", help="Print a template body")
    parser_template_show.add_argument("id", help="Template id")

    for cmd, help_text in (("add", "Save a custom template"), ("update", "Replace a custom template")):
        p = template_sub.add_parser(cmd, help=help_text)
        if cmd == "update":
            p.add_argument("id", help="Template id")
        p.add_argument("name", help="Display name")
        p.add_argument("file", help="Template body file, or '-' for stdin")
        p.add_argument("--description", default="", help="Short description")
        p.add_argument("--icon", default="file", help="Icon name (default: file)")

    parser_template_rm = template_sub.add_parser("rm", help="Delete a custom template")
    parser_template_rm.add_argument("id", help="Template id")

    parser_template_new = template_sub.add_parser("new-note", help="Create a note from a template")
    parser_template_new.add_argument("id", help="Template id")
    parser_template_new.add_argument("filename", help="Note filename, e.g. 2024-01-01.md")
    parser_template_new.add_argument("--daily", action="store_true", help="Create a daily note")

    parser_serve = subparsers.add_parser("serve", help="Start local JSON API server")
    parser_serve.add_argument(
        "--host", default=None,
        help="Host to bind to (default: [server].host or 127.0.0.1)"
    )
    parser_serve.add_argument(
        "--port", type=int, default=None,
        help="Port to bind to (default: [server].port or 8765)"
    )
    parser_serve.add_argument(
        "--token", default="auto",
        help="Bearer token (auto|<string>|none, default: auto)"
    )
    parser_serve.add_argument(
        "--cors", action="store_true",
        help="Enable CORS (default: false)"
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    rt = build_runtime(root=args.root, config_path=args.config)
    configure_logging("DEBUG" if args.verbose else rt.config.log.level)

    handlers = {
        "init": cmd_init,
        "ls": cmd_ls,
        "links": cmd_links,
        "resolve": cmd_resolve,
        "backlinks": cmd_backlinks,
        "link-new": cmd_link_new,
        "rm": cmd_rm,
        "mv": cmd_mv,
        "serve": cmd_serve,
    }

    if args.cmd == "template":
        template_handlers = {
            "ls": cmd_template_ls,
            "show": cmd_template_show,
            "add": cmd_template_add,
            "update": cmd_template_update,
            "rm": cmd_template_rm,
            "new-note": cmd_template_new_note,
        }
        handler = template_handlers.get(args.template_cmd)
    else:
        handler = handlers.get(args.cmd)
    if handler:
        try:
            exit_code = handler(args, rt)
            sys.exit(exit_code)
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(f"Unknown command: {args.cmd}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
