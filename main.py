import logging

from app.config import load_config
from app.ui.gradio_app import launch_ui

config = load_config()

logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

if not config.token:
    print("GITHUB_TOKEN not set, requests will be unauthenticated and rate limited.")

print(f"Launching GitHub Project Viewer against {config.api_url}...")
launch_ui(config)
