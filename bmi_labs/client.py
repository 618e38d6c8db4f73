import argparse
import asyncio
import math
from typing import Optional

from loguru import logger
from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client

from bmi_labs.calculator import INVALID_INPUT_MESSAGE
from bmi_labs.config import configure_logging, get_settings

TOOL_NAME = "calculate_bmi"


def default_server_params() -> StdioServerParameters:
    return StdioServerParameters(command=get_settings().server_command, args=["-m", "bmi_labs.server"])


async def request_bmi(height: float, weight: float, server_params: Optional[StdioServerParameters] = None) -> Optional[str]:
    """
    Launch the BMI server over stdio and run the calculate_bmi tool.
    Returns the tool's text, or None if the server could not be reached
    or reported a tool error.
    """
    server_params = server_params or default_server_params()
    try:
        async with stdio_client(server_params) as (read, write):
            async with ClientSession(read, write) as session:
                info = await session.initialize()
                logger.info(f"Connected to {info.serverInfo.name} v{info.serverInfo.version}")

                result = await session.call_tool(TOOL_NAME, arguments={"height_m": height, "weight_kg": weight})
                if result.isError:
                    logger.error(f"{TOOL_NAME} failed: {result.content[0].text}")
                    return None
                return result.content[0].text
    except Exception as e:
        logger.error(f"Error calling {TOOL_NAME}: {str(e)}")
        return None


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="bmi-client", description="Calculate BMI through the BMI server")
    parser.add_argument("height", type=float, help="height in meters")
    parser.add_argument("weight", type=float, help="weight in kilograms")
    args = parser.parse_args(argv)

    # NaN and infinity do not survive the JSON encoding of tool arguments
    if not (math.isfinite(args.height) and math.isfinite(args.weight)):
        print(INVALID_INPUT_MESSAGE)
        return 0

    configure_logging()
    result = asyncio.run(request_bmi(args.height, args.weight))
    if result is None:
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
