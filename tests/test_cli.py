"""Tests for the command-line interface."""

import json

import pytest

from shortener.cli import ShortenerCLI, async_main, build_parser


@pytest.fixture
def cli(service):
    return ShortenerCLI(db_url="memory://", service=service)


def _run(cli, argv):
    return cli.run(build_parser().parse_args(argv))


@pytest.mark.asyncio
class TestCLI:
    """Test CLI commands against an in-memory service."""

    async def test_shorten(self, cli, capsys):
        assert await _run(cli, ["shorten", "https://example.com"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["success"]
        assert output["original_url"] == "https://example.com"
        assert len(output["short_code"]) == 6

    async def test_resolve_counts_as_click(self, cli, service, capsys):
        link = await service.create("example.com")

        assert await _run(cli, ["resolve", link.code]) == 0
        assert json.loads(capsys.readouterr().out)["original_url"] == "example.com"

        assert await _run(cli, ["stats", link.code]) == 0
        stats = json.loads(capsys.readouterr().out)
        assert stats["click_count"] == 1
        assert stats["clicks"][0]["user_agent"] == "shortener-cli"

    async def test_unknown_code(self, cli, capsys):
        assert await _run(cli, ["resolve", "zzzzzz"]) == 1
        assert await _run(cli, ["stats", "zzzzzz"]) == 1

        err = capsys.readouterr().err
        assert "zzzzzz" in err

    async def test_list(self, cli, service, capsys):
        await service.create("https://one.example")
        await service.create("https://two.example")

        assert await _run(cli, ["list"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["count"] == 2
        assert [u["original_url"] for u in output["urls"]] == ["https://one.example", "https://two.example"]

    async def test_health(self, cli, capsys):
        assert await _run(cli, ["health"]) == 0
        assert json.loads(capsys.readouterr().out)["health"]["overall"]

    async def test_async_main_with_memory_store(self, capsys):
        assert await async_main(["--db-url", "memory://", "shorten", "https://example.com"]) == 0
        assert json.loads(capsys.readouterr().out)["success"]

    async def test_async_main_without_command(self, capsys):
        assert await async_main(["--db-url", "memory://"]) == 1
