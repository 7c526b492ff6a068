#!/usr/bin/env python3
"""
Flask REST API for Creative Assistant Service.

Uses environment variables for configuration (see config_loader).
"""
import logging
import os
from typing import Optional

from dotenv import load_dotenv

from creative_assistant import CreativeAssistantApp, load_config_from_env
from creative_assistant.api import create_app

# Load environment variables
load_dotenv()

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)


def _initialize_assistant_from_env() -> Optional[CreativeAssistantApp]:
    """Initialize the assistant from environment variables."""
    try:
        config = load_config_from_env()
        if config.verbose:
            logging.getLogger("creative_assistant").setLevel(logging.DEBUG)
        assistant = CreativeAssistantApp(config)
        assistant.initialize()
        logger.info("Assistant initialized successfully from environment variables")
        return assistant
    except Exception as e:
        logger.error(f"Failed to initialize assistant: {str(e)}", exc_info=True)
        return None


# Message limit comes from the assistant's config when it initialized
app = create_app(_initialize_assistant_from_env())


if __name__ == "__main__":
    port = int(os.getenv("PORT", 7860))
    # Disable debug mode for production
    app.run(host="0.0.0.0", port=port, debug=False)
