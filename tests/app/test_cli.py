import argparse

import pytest

from src.app.cli import create_parser, run_command


def parse(*argv: str) -> argparse.Namespace:
    return create_parser().parse_args(list(argv))


def test_parser_defaults():
    args = parse("export")

    assert args.command == "export"
    assert args.path is None
    assert args.database_url is None
    assert args.debug is False


def test_parser_rejects_unknown_command():
    with pytest.raises(SystemExit):
        parse("purge")


@pytest.mark.asyncio
async def test_export_then_import(test_container, archive_path, capsys):
    service = test_container.client_service()
    await service.ensure_license_types(["A", "B"])
    await service.create_client("Amina Benali", "AB1", "1990-05-17", ["B"])

    assert await run_command(parse("export"), test_container) == 0
    assert archive_path.read_text(encoding="utf-8").startswith("Amina Benali;;AB1;;")

    await service.delete_client("AB1")
    assert await run_command(parse("import", "--path", str(archive_path)), test_container) == 0

    output = capsys.readouterr().out
    assert "Exported 1 clients" in output
    assert "Imported 1 clients" in output
    assert (await service.get_client_by_national_id("AB1")).license_types == frozenset({"B"})


@pytest.mark.asyncio
async def test_list_prints_clients(test_container, capsys):
    service = test_container.client_service()
    await service.create_client("Amina Benali", "AB1", "1990-05-17", [])

    assert await run_command(parse("list"), test_container) == 0

    output = capsys.readouterr().out
    assert "CIN: AB1" in output
    assert "1 clients" in output
