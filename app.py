import os
import sys
import logging

from dotenv import load_dotenv

from nba_winpct.orchestration.config import build_estimator, load_config
from nba_winpct.web.app import create_app

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

config_path = os.getenv("NBA_WINPCT_CONFIG", "configs/default.yaml")
model_path = os.getenv("NBA_WINPCT_MODEL")

logger.info(f"Config: {config_path}")
estimator = build_estimator(load_config(config_path))
if model_path:
    logger.info(f"Loading saved model from {model_path}")
    estimator.load(model_path)

# Training runs in the background unless a saved model was loaded
app = create_app(estimator)

if __name__ == '__main__':
    port = int(os.getenv('PORT', 5000))
    logger.info(f"Starting on port {port}")
    app.run(host='0.0.0.0', port=port)
