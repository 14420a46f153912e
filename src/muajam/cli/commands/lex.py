"""
Lexicon commands.
"""

import json
import sys
from pathlib import Path
from rich import print_json
from muajam.cli import client


def add_subparser(subparsers):
    parser = subparsers.add_parser("lex", help="Lexicon management")
    lex_sub = parser.add_subparsers(dest="lex_command", required=True)

    # search
    search_p = lex_sub.add_parser("search", help="Search all dictionaries")
    search_p.add_argument("q", help="Query (at least 2 characters)")
    search_p.add_argument("--json", action="store_true", help="Print raw results")
    search_p.set_defaults(func=lex_search)

    # dups
    dups_p = lex_sub.add_parser("dups", help="Duplicate-entry report")
    dups_p.set_defaults(func=lex_dups)

    # add
    add_p = lex_sub.add_parser("add", help="Add a word, stop word or verb")
    add_p.add_argument("--pos", required=True, choices=["word", "stop", "verb"])
    add_p.add_argument("--word", help="Word (word/stop)")
    add_p.add_argument("--past", help="Past tense (verb)")
    add_p.add_argument("--pres", help="Present tense (verb)")
    add_p.add_argument("--def", dest="definition", required=True, help="Definition")
    add_p.set_defaults(func=lex_add)

    # update
    update_p = lex_sub.add_parser("update", help="Change an entry's definition")
    update_p.add_argument("entry_id", help="Entry ID")
    update_p.add_argument("term0", help="Current word or past tense")
    update_p.add_argument("term1", nargs="?", default="", help="Current present tense (verbs)")
    update_p.add_argument("--def", dest="definition", required=True, help="New definition")
    update_p.set_defaults(func=lex_update)

    # delete
    delete_p = lex_sub.add_parser("delete", help="Delete an entry")
    delete_p.add_argument("entry_id", help="Entry ID")
    delete_p.add_argument("term0", help="Current word or past tense")
    delete_p.add_argument("term1", nargs="?", default="", help="Current present tense (verbs)")
    delete_p.set_defaults(func=lex_delete)

    # refresh
    refresh_p = lex_sub.add_parser("refresh", help="Rebuild dictionary indexes")
    refresh_p.set_defaults(func=lex_refresh)

    # load
    load_p = lex_sub.add_parser("load", help="Add entries from a JSON file")
    load_p.add_argument("file", help="JSON list of {pos, word | past + pres, def}")
    load_p.set_defaults(func=lex_load)


def format_entry(e: dict) -> str:
    terms = " / ".join(e["terms"])
    return f"{e['id']}  {e['pos']:5} {terms:24} {e['definition']}  [{e['dictionary']}]"


def lex_search(args):
    try:
        results = client.search(args.q)
        if args.json:
            print_json(data=results)
            return
        if not results:
            print("No results.")
            return
        for e in results:
            print(format_entry(e))
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def lex_dups(args):
    try:
        results = client.duplicates()
        if not results:
            print("No duplicates.")
            return
        for e in results:
            print(format_entry(e))
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def lex_add(args):
    entry = {
        "pos": args.pos,
        "word": args.word,
        "past": args.past,
        "pres": args.pres,
        "def": args.definition,
    }
    try:
        result = client.add_entry(entry)
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if result.get("errors"):
        for err in result["errors"]:
            print(f"✗ {err}")
        sys.exit(1)
    print(f"✓ Added: {format_entry(result['entry'])}")


def lex_update(args):
    try:
        client.update_entry(args.entry_id, args.term0, args.term1, args.definition)
        print(f"✓ ID {args.entry_id} updated")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def lex_delete(args):
    try:
        client.delete_entry(args.entry_id, args.term0, args.term1)
        print(f"✓ ID {args.entry_id} deleted")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def lex_refresh(args):
    try:
        client.refresh()
        print("✓ Refreshed")
    except Exception as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def lex_load(args):
    path = Path(args.file)
    if not path.exists():
        print(f"✗ File not found: {args.file}")
        sys.exit(1)

    entries = json.loads(path.read_text(encoding="utf-8"))
    added = failed = 0

    for i, entry in enumerate(entries):
        try:
            result = client.add_entry(entry)
        except Exception as e:
            print(f"✗ [{i}] {e}")
            failed += 1
            continue
        if result.get("errors"):
            print(f"✗ [{i}] {'; '.join(result['errors'])}")
            failed += 1
        else:
            added += 1

    print(f"✓ Loaded {added} entries ({failed} failed)")
