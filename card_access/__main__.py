# =======================================================================================
# card_access/__main__.py - Development Server
# =======================================================================================
import uvicorn

from .config import config


def main():
    uvicorn.run("card_access.main:app", host=config.API_HOST, port=config.API_PORT)


if __name__ == "__main__":
    main()
