import logging
import sys
from sidehustle.utils.config import config

# Configure root logger - set to ERROR by default to suppress all non-SideHustle logs
logging.basicConfig(level=logging.ERROR, format=config.log_format, stream=sys.stdout)

# Configure only the SideHustle logger to show logs at the configured level
sidehustle_logger = logging.getLogger('sidehustle')
sidehustle_logger.setLevel(config.log_level)

# Create a dedicated handler for SideHustle logs
sidehustle_handler = logging.StreamHandler(sys.stdout)
sidehustle_handler.setFormatter(logging.Formatter(config.log_format))

# Remove any existing handlers to avoid duplicate logs
if sidehustle_logger.handlers:
    for handler in list(sidehustle_logger.handlers):
        sidehustle_logger.removeHandler(handler)

sidehustle_logger.addHandler(sidehustle_handler)

# Prevent SideHustle logs from propagating to the root logger to avoid duplication
sidehustle_logger.propagate = False

# Upstream client and server loggers stay at WARNING unless debugging
for name in ("openai", "httpx", "httpcore", "uvicorn", "uvicorn.access", "uvicorn.error"):
    logging.getLogger(name).setLevel(config.log_level if config.log_level == "DEBUG" else logging.WARNING)

# Get our specific module logger
logger = logging.getLogger(__name__)
