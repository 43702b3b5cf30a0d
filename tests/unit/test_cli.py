"""
Unit tests for the command-line entry points
"""

import logging
import pytest
from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, Mock, patch
from core.exceptions import ArgumentParseError, SourceConnectionError
from core.versions import resolve
from ingestion.runner import FnddsImporter, FpedImporter
from scripts import load_fndds, load_fped, remove_fndds
from scripts.common import parse_arguments, resolve_arguments, run_import


def fake_session_factory(session):
    @asynccontextmanager
    async def get_db_session():
        yield session
    return get_db_session


class TestArguments:
    """Test argument parsing and version resolution"""

    def test_parse_arguments(self):
        assert parse_arguments(["16", "/data/fndds5"]) == (16, "/data/fndds5")

    @pytest.mark.parametrize("argv", [[], ["16"]])
    def test_missing_arguments(self, argv):
        with pytest.raises(ArgumentParseError):
            parse_arguments(argv)

    def test_non_integer_version(self):
        with pytest.raises(ArgumentParseError) as exc_info:
            parse_arguments(["sixteen", "/data"])

        assert exc_info.value.context["version_id"] == "sixteen"

    def test_resolve_arguments(self):
        descriptor, conn_string = resolve_arguments(["8", "sqlite+aiosqlite:///fndds.db"])

        assert descriptor == resolve(8)
        assert conn_string == "sqlite+aiosqlite:///fndds.db"

    def test_unknown_version_is_fatal(self, caplog):
        with caplog.at_level(logging.CRITICAL):
            assert resolve_arguments(["3", "/data"]) is None

        assert "Invalid FNDDS version: 3" in caplog.text


class TestLoadFnddsMain:
    """Test the fndds-load entry point"""

    @pytest.mark.parametrize("argv", [[], ["16"], ["abc", "/data"], ["3", "/data"]])
    def test_bad_arguments_stop_before_import(self, argv, caplog):
        with patch("scripts.load_fndds.run_import", new_callable=AsyncMock) as mock_run:
            with caplog.at_level(logging.CRITICAL):
                load_fndds.main(argv)

        mock_run.assert_not_called()
        assert any(r.levelno == logging.CRITICAL for r in caplog.records)

    def test_runs_fndds_importer(self):
        with patch("scripts.load_fndds.run_import", new_callable=AsyncMock) as mock_run:
            load_fndds.main(["16", "/data/fndds5"])

        mock_run.assert_awaited_once_with(FnddsImporter, resolve(16), "/data/fndds5")

    def test_fped_entry_point_runs_fped_importer(self):
        with patch("scripts.load_fped.run_import", new_callable=AsyncMock) as mock_run:
            load_fped.main(["4", "/data/fped"])

        mock_run.assert_awaited_once_with(FpedImporter, resolve(4), "/data/fped")


class TestRunImport:
    """Test running an importer inside a destination session"""

    @pytest.mark.asyncio
    async def test_logs_table_counts(self, caplog):
        session = Mock()
        importer = Mock()
        importer.return_value.import_version = AsyncMock(return_value={
            "status": "success",
            "tables": [("main_food_desc", 2), ("nut_desc", 1)],
        })

        with patch("scripts.common.get_db_session", fake_session_factory(session)), \
                patch("scripts.common.engine") as mock_engine:
            mock_engine.dispose = AsyncMock()
            with caplog.at_level(logging.INFO):
                result = await run_import(importer, resolve(16), "/data")

        importer.assert_called_once_with(session)
        assert result["status"] == "success"
        assert "Table: main_food_desc, Records: 2" in caplog.text
        assert "Table: nut_desc, Records: 1" in caplog.text
        mock_engine.dispose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failure_is_logged_and_raised(self, caplog):
        importer = Mock()
        importer.return_value.import_version = AsyncMock(
            side_effect=SourceConnectionError("Failed to open source database")
        )

        with patch("scripts.common.get_db_session", fake_session_factory(Mock())), \
                patch("scripts.common.engine") as mock_engine:
            mock_engine.dispose = AsyncMock()
            with pytest.raises(SourceConnectionError):
                await run_import(importer, resolve(16), "/data")

        assert any(r.levelno == logging.CRITICAL for r in caplog.records)
        mock_engine.dispose.assert_awaited_once()


@pytest.mark.asyncio
async def test_remove_data():
    session = Mock()

    with patch("scripts.remove_fndds.get_db_session", fake_session_factory(session)), \
            patch("scripts.remove_fndds.engine") as mock_engine, \
            patch("scripts.remove_fndds.FnddsImporter") as mock_importer:
        mock_engine.dispose = AsyncMock()
        mock_importer.return_value.remove_all = AsyncMock(return_value=34)

        deleted = await remove_fndds.remove_data()

    assert deleted == 34
    mock_importer.assert_called_once_with(session)
    mock_engine.dispose.assert_awaited_once()
