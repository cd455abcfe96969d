from unittest.mock import MagicMock

import pytest

from jira_mcp.exceptions import RemoteRequestError
from jira_mcp.utils.decorators import check_write_access, report_errors_as_text


class DummyContext:
    def __init__(self, read_only):
        self.request_context = MagicMock()
        self.request_context.lifespan_context = {
            "app_lifespan_context": MagicMock(read_only=read_only)
        }


@pytest.mark.asyncio
async def test_check_write_access_blocks_in_read_only():
    @check_write_access
    async def create_issue(ctx, x):
        return x * 2

    ctx = DummyContext(read_only=True)
    with pytest.raises(ValueError) as exc:
        await create_issue(ctx, 3)
    assert str(exc.value) == "Cannot create issue in read-only mode."


@pytest.mark.asyncio
async def test_check_write_access_allows_in_writable():
    @check_write_access
    async def dummy_tool(ctx, x):
        return x * 2

    ctx = DummyContext(read_only=False)
    assert await dummy_tool(ctx, 4) == 8


@pytest.mark.asyncio
async def test_report_errors_as_text_passes_results_through():
    @report_errors_as_text
    async def dummy_tool(x):
        return f"value {x}"

    assert await dummy_tool(1) == "value 1"


@pytest.mark.asyncio
async def test_report_errors_as_text_converts_exceptions():
    @report_errors_as_text
    async def dummy_tool():
        raise RemoteRequestError("Issue does not exist", 404)

    assert await dummy_tool() == "Error: Issue does not exist"


@pytest.mark.asyncio
async def test_report_errors_wraps_read_only_rejection():
    @report_errors_as_text
    @check_write_access
    async def update_issue(ctx):
        return "updated"

    result = await update_issue(DummyContext(read_only=True))
    assert result == "Error: Cannot update issue in read-only mode."
