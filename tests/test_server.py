import pytest
from mcp.shared.memory import create_connected_server_and_client_session

from bmi_labs.server import mcp


@pytest.mark.anyio
async def test_lists_calculate_bmi_tool():
    async with create_connected_server_and_client_session(mcp._mcp_server) as session:
        tools = await session.list_tools()

    tool = next(t for t in tools.tools if t.name == "calculate_bmi")
    assert set(tool.inputSchema["properties"]) == {"height_m", "weight_kg"}


@pytest.mark.anyio
@pytest.mark.parametrize(
    "arguments, expected",
    [
        ({"height_m": 1.75, "weight_kg": 70}, "Your BMI is 22.86"),
        ({"height_m": 2.0, "weight_kg": 100}, "Your BMI is 25.00"),
        ({"height_m": 0, "weight_kg": 70}, "Invalid input values"),
    ],
)
async def test_calculate_bmi_tool(arguments, expected):
    async with create_connected_server_and_client_session(mcp._mcp_server) as session:
        result = await session.call_tool("calculate_bmi", arguments=arguments)

    assert not result.isError
    assert result.content[0].text == expected


@pytest.mark.anyio
async def test_calculate_bmi_tool_rejects_non_numeric_arguments():
    async with create_connected_server_and_client_session(mcp._mcp_server) as session:
        result = await session.call_tool("calculate_bmi", arguments={"height_m": "tall", "weight_kg": 70})

    assert result.isError
