"""Tests for CLI argument parsing and the server startup banner."""

from muajam.cli import client
from muajam.cli.commands import lex
from muajam.cli.main import build_parser, main
from muajam.config import settings
from muajam.server.main import app, print_banner


def test_parser_routes_to_command():
    args = build_parser().parse_args(["lex", "search", "كتب"])

    assert args.func is lex.lex_search
    assert args.q == "كتب"
    assert args.api_url == settings.api_url


def test_api_url_override(monkeypatch, capsys):
    monkeypatch.setattr(client, "BASE_URL", client.BASE_URL)
    main(["--api-url", "http://lex.local:9000/api/"])

    assert client.BASE_URL == "http://lex.local:9000/api"
    assert "usage: muajam" in capsys.readouterr().out


def test_banner_lists_dictionaries_and_routes(capsys):
    print_banner(app)
    out = capsys.readouterr().out

    assert " > ".join(settings.dictionaries) in out
    assert "[lexicon]" in out
    assert "/api/lexicon/search" in out
    assert "/api/content/{content_id}" in out
