from mcp.server.fastmcp import FastMCP
from loguru import logger

from bmi_labs.calculator import calculate
from bmi_labs.config import configure_logging, get_settings

mcp = FastMCP(get_settings().server_name)


@mcp.tool()
def calculate_bmi(height_m: float, weight_kg: float) -> str:
    """
    Calculate BMI given height in meters and weight in kg.
    Returns "Your BMI is <value>" or "Invalid input values".
    """
    logger.info(f"Client is running the calculate_bmi tool (height_m={height_m}, weight_kg={weight_kg})")
    return calculate(height_m, weight_kg)


def run():
    configure_logging()
    logger.info(f"Starting server {mcp.name}")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run()
