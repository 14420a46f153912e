"""
Content commands.
"""

import sys
from rich.console import Console
from rich.text import Text
from muajam.cli import client


console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("content", help="Submitted content")
    content_sub = parser.add_subparsers(dest="content_command", required=True)

    # add
    add_p = content_sub.add_parser("add", help="Store text")
    add_p.add_argument("text", help="Arabic text")
    add_p.set_defaults(func=content_add)

    # show
    show_p = content_sub.add_parser("show", help="Show stored text, annotated")
    show_p.add_argument("content_id", help="Content ID")
    show_p.add_argument("--defs", action="store_true", help="List definitions of matched words")
    show_p.set_defaults(func=content_show)

    # annotate
    ann_p = content_sub.add_parser("annotate", help="Annotate text without storing it")
    ann_p.add_argument("text", help="Arabic text")
    ann_p.add_argument("--defs", action="store_true", help="List definitions of matched words")
    ann_p.set_defaults(func=content_annotate)


def render_tokens(tokens: list[dict]) -> Text:
    """green: exact, yellow: approximate, red: unknown"""
    text = Text()
    for t in tokens:
        if t["is_delimiter"]:
            style = None
        elif t["exact_match"]:
            style = "green"
        elif t["matched"]:
            style = "yellow"
        else:
            style = "bold red"
        text.append(t["text"], style=style)
    return text


def print_definitions(tokens: list[dict]):
    seen = set()
    for t in tokens:
        d = t.get("definition")
        if not d or d["id"] in seen:
            continue
        seen.add(d["id"])
        terms = " / ".join(d["terms"])
        console.print(f"  {t['text']:12} {terms} ({d['pos']}): {d['definition']}")


def show_document(doc: dict, defs: bool):
    console.print(render_tokens(doc["tokens"]))
    if defs:
        console.print()
        print_definitions(doc["tokens"])


def content_add(args):
    try:
        result = client.create_content(args.text)
        print(f"✓ Created: {result['id']}")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def content_show(args):
    try:
        doc = client.get_content(args.content_id)
        print(f"ID: {doc['id']}")
        show_document(doc, args.defs)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def content_annotate(args):
    try:
        show_document(client.annotate(args.text), args.defs)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
