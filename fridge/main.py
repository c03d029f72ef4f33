import logging

import uvicorn

from fridge.api.api_run import app
from fridge.utilities.config import APP_HOST, APP_PORT, DEBUG, SPOONACULAR_API_KEY


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not SPOONACULAR_API_KEY:
        logging.getLogger("fridge_app").warning("SPOONACULAR_API_KEY not set: recipe endpoints will answer 503.")
    print(f"Uvicorn running on http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
