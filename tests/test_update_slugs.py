"""
Tests for the slug backfill script
"""

import importlib.util
from pathlib import Path
from unittest.mock import Mock, call

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "update_slugs.py"


@pytest.fixture
def update_slugs():
    spec = importlib.util.spec_from_file_location("update_slugs", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.asyncio
async def test_backfills_missing_slugs(update_slugs, mock_database, sample_product):
    table = mock_database.client.table.return_value
    table.execute.side_effect = [
        Mock(data=[
            {**sample_product, "slug": None},
            {**sample_product, "id": "p-2", "name": "Şeffaf Poşet", "slug": ""},
        ]),
        Mock(data=[{**sample_product, "slug": "camasir-suyu-5-l"}]),
        Mock(data=[{**sample_product, "id": "p-2", "name": "Şeffaf Poşet", "slug": "seffaf-poset"}]),
    ]

    updated = await update_slugs.update_product_slugs(mock_database)

    assert updated == 2
    assert table.update.call_args_list == [call({"slug": "camasir-suyu-5-l"}), call({"slug": "seffaf-poset"})]


@pytest.mark.asyncio
async def test_failure_does_not_stop_run(update_slugs, mock_database, sample_product):
    table = mock_database.client.table.return_value
    table.execute.side_effect = [
        Mock(data=[
            {**sample_product, "slug": None},
            {**sample_product, "id": "p-2", "name": "Şeffaf Poşet", "slug": None},
        ]),
        RuntimeError("column slug does not exist"),
        Mock(data=[{**sample_product, "id": "p-2", "name": "Şeffaf Poşet", "slug": "seffaf-poset"}]),
    ]

    updated = await update_slugs.update_product_slugs(mock_database)

    assert updated == 1


@pytest.mark.asyncio
async def test_nothing_to_do(update_slugs, mock_database):
    mock_database.client.table.return_value.execute.return_value = Mock(data=[])

    assert await update_slugs.update_product_slugs(mock_database) == 0
